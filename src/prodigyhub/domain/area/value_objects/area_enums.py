from enum import Enum


class AreaType(str, Enum):
    URBAN = "urban"
    SUBURBAN = "suburban"
    RURAL = "rural"


class AreaStatus(str, Enum):
    ACTIVE = "active"
    PLANNED = "planned"
    INACTIVE = "inactive"
