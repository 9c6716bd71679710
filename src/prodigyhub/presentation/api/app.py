"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All business endpoints live under the ``/api`` prefix, using the TMF
resource paths the frontend already calls. The health check and the
info endpoint stay at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from prodigyhub.presentation.api.routers import (
    address_sync_router,
    areas_router,
    qualifications_router,
    users_router,
)
from prodigyhub_config.settings import Settings, get_settings


@lru_cache(maxsize=4)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the prodigyhub application with:
    - Console output with timestamps and module names
    - Configurable log level for prodigyhub modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("prodigyhub").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Qualification",
        "description": """TMF679 Product Offering Qualification.

**Resources:**
- `checkProductOfferingQualification` - qualification records (CRUD)
- `locationQualification` - evaluate fiber/ADSL/mobile at a location

**Legacy notes:**
Older clients store the location as a `SLT_LOCATION:{json}` note. Such
records get a structured `location` on create and update.
""",
    },
    {
        "name": "Address Sync",
        "description": """Copy qualification locations onto user addresses.

**Matching:**
- By the email of the first `relatedParty`, when it belongs to a user
- Otherwise a guess (newest user without an address, then newest user),
  reported as `heuristicMatches`
""",
    },
    {
        "name": "Users",
        "description": """Customer accounts.

Passwords are stored as bcrypt hashes and never returned.
""",
    },
    {
        "name": "Areas",
        "description": """TMF-style area management.

Areas record which infrastructure serves a district. With
`INFRASTRUCTURE_PROVIDER=area` location checks read them first.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    database: Database = app.state.database

    logger.info("Starting ProdigyHub API v%s...", API_VERSION)
    try:
        await database.connect()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down ProdigyHub API...")
    await database.disconnect()


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted.

    Returns
    -------
    APIRouter to be included under ``/api``.
    """
    api_router = APIRouter()

    api_router.include_router(
        qualifications_router,
        prefix="/productOfferingQualification/v5",
        tags=["Qualification"],
    )
    api_router.include_router(address_sync_router, tags=["Address Sync"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    api_router.include_router(
        areas_router,
        prefix="/areaManagement/v5",
        tags=["Areas"],
    )

    return api_router


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    database
        Optional database override; by default one is built from
        ``settings.database_url``. It is connected on startup.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    if database is None:
        database = Database(settings.database_url, echo=settings.debug)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Telecom customer backend: **TMF679 product offering "
            "qualification**, users, areas and **address sync**."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "database": "connected" if database.is_connected else "disconnected",
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "qualification": (
                    f"{API_PREFIX}/productOfferingQualification/v5"
                    "/checkProductOfferingQualification"
                ),
                "location_qualification": (
                    f"{API_PREFIX}/productOfferingQualification/v5/locationQualification"
                ),
                "address_sync": f"{API_PREFIX}/sync-addresses",
                "users": f"{API_PREFIX}/users",
                "areas": f"{API_PREFIX}/areaManagement/v5/area",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
