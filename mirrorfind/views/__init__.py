"""
Frontend views/pages for the application.
This module combines all the individual view routers into a single router.
"""
from fastapi import APIRouter

from mirrorfind.views.general import router as general_router
from mirrorfind.views.search import router as search_router

# Create a combined router
router = APIRouter()

router.include_router(general_router)
router.include_router(search_router)
