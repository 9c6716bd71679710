from prodigyhub.domain.area.repositories.area_repository import AreaRepository

__all__ = ["AreaRepository"]
