# ============================================================================
# FILE: app/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr
from datetime import datetime

class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str
    email: EmailStr
    password: str

class UserResponse(BaseModel):
    """Schema for user response (the stored password is never returned)"""
    id: int
    username: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
