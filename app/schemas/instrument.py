# ============================================================================
# FILE: app/schemas/instrument.py
# ============================================================================
from pydantic import BaseModel

class DefinedInstrumentResponse(BaseModel):
    """Schema for a catalog instrument"""
    id: int
    name: str

    class Config:
        from_attributes = True

class SongInstrumentResponse(BaseModel):
    """Schema for an instrument attached to a song, with its progress"""
    id: int
    song_id: int
    instrument_id: int
    progress: int
    instrument: DefinedInstrumentResponse

    class Config:
        from_attributes = True

class InstrumentProgressUpdate(BaseModel):
    """Schema for updating practice progress (no bounds check)"""
    progress: int
