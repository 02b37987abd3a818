"""HTTP API package (FastAPI)."""

from .api_app import api_app, create_api_app

__all__ = ["api_app", "create_api_app"]
