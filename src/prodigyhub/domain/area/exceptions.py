"""Area domain exceptions."""

from prodigyhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class AreaNotFoundError(EntityNotFoundError):
    def __init__(self, area_id: str) -> None:
        self.area_id = area_id
        super().__init__(
            "Area not found",
            code=ErrorCode.AREA_NOT_FOUND,
            details={"area_id": area_id},
        )


class DuplicateAreaError(ConflictError):
    def __init__(self, district: str, province: str) -> None:
        self.district = district
        self.province = province
        super().__init__(
            "Area with this district and province already exists",
            code=ErrorCode.DUPLICATE_AREA,
            details={"district": district, "province": province},
        )
