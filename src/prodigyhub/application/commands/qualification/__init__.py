"""Qualification commands - TMF679 CheckProductOfferingQualification."""

from prodigyhub.application.commands.qualification.check_location_qualification_command import (
    CheckLocationQualificationCommand,
)
from prodigyhub.application.commands.qualification.create_qualification_command import (
    QUALIFICATION_RESOURCE_PATH,
    CreateQualificationCommand,
)
from prodigyhub.application.commands.qualification.delete_qualification_command import (
    DeleteQualificationCommand,
)
from prodigyhub.application.commands.qualification.update_qualification_command import (
    UpdateQualificationCommand,
)

__all__ = [
    "CheckLocationQualificationCommand",
    "CreateQualificationCommand",
    "DeleteQualificationCommand",
    "QUALIFICATION_RESOURCE_PATH",
    "UpdateQualificationCommand",
]
