# ============================================================================
# FILE: app/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.v1.endpoints import songs, instruments, users

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(instruments.router, prefix="/instruments", tags=["instruments"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
