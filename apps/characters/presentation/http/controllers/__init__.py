"""HTTP controllers (routers)."""

from apps.characters.presentation.http.controllers.characters import (
    router as characters_router,
)
from apps.characters.presentation.http.controllers.health import router as health_router

__all__ = ["characters_router", "health_router"]
