"""Application factories."""

from prodigyhub.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
