"""
API v1 routes.
"""

from fastapi import APIRouter

from src.api.v1 import access

router = APIRouter()

router.include_router(access.router, prefix="/access", tags=["Access"])
