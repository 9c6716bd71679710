"""Area domain - serviced districts and their recorded infrastructure."""

from prodigyhub.domain.area.entities import Area
from prodigyhub.domain.area.exceptions import AreaNotFoundError, DuplicateAreaError
from prodigyhub.domain.area.repositories import AreaRepository
from prodigyhub.domain.area.value_objects import AreaStatus, AreaType

__all__ = [
    "Area",
    "AreaNotFoundError",
    "AreaRepository",
    "AreaStatus",
    "AreaType",
    "DuplicateAreaError",
]
