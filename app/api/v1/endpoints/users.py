# ============================================================================
# FILE: app/api/v1/endpoints/users.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import user_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

DUPLICATE_USER = "建立使用者失敗，可能是 Email 重複了"

@router.post("", response_model=UserResponse)
async def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user
    """
    # Check if username or email already exists
    if user_service.get_user_by_username(db, user_data.username) or \
            user_service.get_user_by_email(db, user_data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_USER)

    try:
        return user_service.create_user(db, user_data)
    except IntegrityError as e:
        logger.error(f"Create user rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_USER)
    except SQLAlchemyError as e:
        logger.error(f"Create user error: {e}")
        raise HTTPException(status_code=500, detail="建立使用者失敗")
