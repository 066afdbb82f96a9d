# ============================================================================
# FILE: app/api/dependencies.py
# ============================================================================
from fastapi import Header
from typing import Optional
from app.config import settings

def get_current_user_id(
    x_user_id: Optional[int] = Header(None, description="Owning user id")
) -> int:
    """
    Resolve the user that owns new records.
    Uses the X-User-Id header when sent, otherwise settings.DEFAULT_USER_ID.
    No authentication is done here; swap this dependency for a real one when login exists.
    """
    if x_user_id is not None:
        return x_user_id
    return settings.DEFAULT_USER_ID
