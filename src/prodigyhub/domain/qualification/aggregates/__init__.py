from prodigyhub.domain.qualification.aggregates.qualification import (
    DEFAULT_QUALIFICATION_TYPE,
    Qualification,
)

__all__ = ["DEFAULT_QUALIFICATION_TYPE", "Qualification"]
