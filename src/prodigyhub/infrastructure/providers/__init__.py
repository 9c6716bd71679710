"""Infrastructure availability providers."""

from prodigyhub.infrastructure.providers.area_provider import (
    AreaInfrastructureProvider,
)
from prodigyhub.infrastructure.providers.random_provider import (
    RandomInfrastructureProvider,
)

__all__ = ["AreaInfrastructureProvider", "RandomInfrastructureProvider"]
