"""
FastAPI application setup.

Architecture:
- All routes live under /api/pagemap (read-only)
- Services come from the process-wide Application (pagemap.app.get_application)
- create_api_app() builds a fresh app; ``api_app`` is the default instance for ASGI servers
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from pagemap.__version__ import __version__
from pagemap.helpers.exceptions import PagemapError
from pagemap.interfaces.api import web

logger = logging.getLogger(__name__)


def create_api_app() -> FastAPI:
    app = FastAPI(title="pagemap", version=__version__)

    @app.exception_handler(PagemapError)
    async def pagemap_error_handler(request, exc: PagemapError):
        logger.error("[API] %s on %s: %s", type(exc).__name__, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(web.router)
    return app


api_app = create_api_app()
