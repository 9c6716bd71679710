from prodigyhub.domain.user.aggregates.user import User

__all__ = ["User"]
