"""DTOs for address sync runs and status."""

from dataclasses import dataclass


def format_percentage(part: int, total: int) -> str:
    """Format ``part / total`` as ``"12.34%"``; ``"0%"`` when total is zero."""
    if total <= 0:
        return "0%"
    return f"{part / total * 100:.2f}%"


@dataclass
class AddressSyncResult:
    """Tally of one batch address sync."""

    total_qualifications: int = 0
    synced_count: int = 0
    error_count: int = 0

    # Synced records whose user was guessed rather than matched by email
    heuristic_matches: int = 0

    @property
    def success_rate(self) -> str:
        return format_percentage(self.synced_count, self.total_qualifications)


@dataclass(frozen=True)
class AddressSyncStatus:
    """How many users carry an address and how many records could supply one."""

    total_users: int
    users_with_address: int
    qualifications_with_location: int

    @property
    def users_without_address(self) -> int:
        return self.total_users - self.users_with_address

    @property
    def sync_percentage(self) -> str:
        return format_percentage(self.users_with_address, self.total_users)
