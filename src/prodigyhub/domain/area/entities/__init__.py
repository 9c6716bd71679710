from prodigyhub.domain.area.entities.area import Area

__all__ = ["Area"]
