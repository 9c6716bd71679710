from prodigyhub.domain.area.value_objects.area_enums import AreaStatus, AreaType

__all__ = ["AreaStatus", "AreaType"]
