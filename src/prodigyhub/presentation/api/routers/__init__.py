from prodigyhub.presentation.api.routers.address_sync import (
    router as address_sync_router,
)
from prodigyhub.presentation.api.routers.areas import router as areas_router
from prodigyhub.presentation.api.routers.qualifications import (
    router as qualifications_router,
)
from prodigyhub.presentation.api.routers.users import router as users_router

__all__ = [
    "address_sync_router",
    "areas_router",
    "qualifications_router",
    "users_router",
]
