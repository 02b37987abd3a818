"""
Web API package.

Exposes the combined router for inclusion in the FastAPI app.
"""

from fastapi import APIRouter

from pagemap.interfaces.api.web import discovery_if

# Create combined router
router = APIRouter()
router.include_router(discovery_if.router)

__all__ = ["router"]
