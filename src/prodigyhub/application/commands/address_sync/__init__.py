"""Address sync commands - copy qualification locations onto users."""

from prodigyhub.application.commands.address_sync.sync_addresses_command import (
    SyncAddressesCommand,
)
from prodigyhub.application.commands.address_sync.sync_address_to_user_command import (
    SyncAddressToUserCommand,
)
from prodigyhub.application.commands.address_sync.sync_qualification_address_command import (
    SyncQualificationAddressCommand,
)

__all__ = [
    "SyncAddressToUserCommand",
    "SyncAddressesCommand",
    "SyncQualificationAddressCommand",
]
