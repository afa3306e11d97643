"""
Franchise API Router - Combined Sub-Routers.

Sub-routers:
- franchise: Create/get/delete, phases, season simulation, evaluation
- trades: Trade previews and proposals
- free_agency: Free agent pool and signings
- draft: Draft board and picks
"""

from fastapi import APIRouter

from .draft import router as draft_router
from .franchise import router as franchise_router
from .free_agency import router as free_agency_router
from .trades import router as trades_router

router = APIRouter()

router.include_router(franchise_router)
router.include_router(trades_router)
router.include_router(free_agency_router)
router.include_router(draft_router)

__all__ = [
    "router",
    "draft_router",
    "franchise_router",
    "free_agency_router",
    "trades_router",
]
