"""API routers."""

from hardwood.api.routers.franchise import router as franchise_router

__all__ = ["franchise_router"]
