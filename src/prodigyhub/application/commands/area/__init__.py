"""Area commands - serviced area management."""

from prodigyhub.application.commands.area.create_area_command import (
    CreateAreaCommand,
)
from prodigyhub.application.commands.area.delete_area_command import (
    DeleteAreaCommand,
)
from prodigyhub.application.commands.area.update_area_command import (
    UpdateAreaCommand,
)

__all__ = ["CreateAreaCommand", "DeleteAreaCommand", "UpdateAreaCommand"]
