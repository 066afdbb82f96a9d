# ============================================================================
# FILE: app/api/v1/endpoints/instruments.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.schemas.instrument import (
    DefinedInstrumentResponse,
    SongInstrumentResponse,
    InstrumentProgressUpdate
)
from app.services.instrument_service import instrument_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[DefinedInstrumentResponse])
async def list_instruments(db: Session = Depends(get_db)):
    """Full instrument catalog, for selection menus"""
    try:
        return instrument_service.list_catalog(db)
    except SQLAlchemyError as e:
        logger.error(f"List instruments error: {e}")
        raise HTTPException(status_code=500, detail="無法讀取樂器列表")

@router.patch("/{song_instrument_id}", response_model=SongInstrumentResponse)
async def update_instrument_progress(
    song_instrument_id: int,
    update_data: InstrumentProgressUpdate,
    db: Session = Depends(get_db)
):
    """Set practice progress for one instrument of one song"""
    try:
        song_instrument = instrument_service.update_progress(db, song_instrument_id, update_data.progress)
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Update progress error: {e}")
        raise HTTPException(status_code=500, detail="無法更新練習進度")
    if not song_instrument:
        raise HTTPException(status_code=404, detail="找不到這個樂器的練習紀錄")
    return song_instrument
