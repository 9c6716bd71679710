"""User commands - account signup and profile management."""

from prodigyhub.application.commands.user.create_user_command import (
    CreateUserCommand,
)
from prodigyhub.application.commands.user.delete_user_command import (
    DeleteUserCommand,
)
from prodigyhub.application.commands.user.update_user_command import (
    UpdateUserCommand,
)

__all__ = ["CreateUserCommand", "DeleteUserCommand", "UpdateUserCommand"]
