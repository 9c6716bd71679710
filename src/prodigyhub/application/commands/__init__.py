"""Command layer - write operations that mutate state.

Commands are organized by domain:
- address_sync: Copying qualification locations onto user addresses
- qualification: TMF679 qualification records and location checks
- user: Customer accounts
- area: Serviced areas
"""

from prodigyhub.application.commands.address_sync import (
    SyncAddressesCommand,
    SyncAddressToUserCommand,
    SyncQualificationAddressCommand,
)
from prodigyhub.application.commands.area import (
    CreateAreaCommand,
    DeleteAreaCommand,
    UpdateAreaCommand,
)
from prodigyhub.application.commands.qualification import (
    QUALIFICATION_RESOURCE_PATH,
    CheckLocationQualificationCommand,
    CreateQualificationCommand,
    DeleteQualificationCommand,
    UpdateQualificationCommand,
)
from prodigyhub.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "CheckLocationQualificationCommand",
    "CreateAreaCommand",
    "CreateQualificationCommand",
    "CreateUserCommand",
    "DeleteAreaCommand",
    "DeleteQualificationCommand",
    "DeleteUserCommand",
    "QUALIFICATION_RESOURCE_PATH",
    "SyncAddressToUserCommand",
    "SyncAddressesCommand",
    "SyncQualificationAddressCommand",
    "UpdateAreaCommand",
    "UpdateQualificationCommand",
    "UpdateUserCommand",
]
