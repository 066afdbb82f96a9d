# ============================================================================
# FILE: app/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from app.db.models.song import SongStatus
from app.schemas.instrument import SongInstrumentResponse

class SongCreate(BaseModel):
    """Schema for creating a song with the catalog instruments to practice"""
    title: str
    artist: str
    youtube_url: Optional[str] = None
    instrument_ids: List[int] = Field(default_factory=list, alias="instrumentIds")

    class Config:
        populate_by_name = True

class SongStatusUpdate(BaseModel):
    """Schema for changing a song's status"""
    status: SongStatus

class SongResponse(BaseModel):
    """Schema for song response with nested instruments"""
    id: int
    title: str
    artist: str
    youtube_url: Optional[str] = None
    user_id: int
    status: SongStatus
    created_at: datetime
    instruments: List[SongInstrumentResponse] = []

    class Config:
        from_attributes = True
