from prodigyhub.application.queries.address_sync.address_sync_status_query import (
    AddressSyncStatusQuery,
)

__all__ = ["AddressSyncStatusQuery"]
