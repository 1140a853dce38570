"""API routers."""

from server.routers.structure import router

__all__ = ["router"]
