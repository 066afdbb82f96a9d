# ============================================================================
# FILE: app/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.api.dependencies import get_current_user_id
from app.schemas.song import SongCreate, SongStatusUpdate, SongResponse
from app.services.song_service import song_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

SONG_NOT_FOUND = "找不到這首歌曲"

@router.get("", response_model=List[SongResponse])
async def list_songs(db: Session = Depends(get_db)):
    """
    List every song that is not archived, newest first,
    each with its instruments and practice progress
    """
    try:
        return song_service.list_active_songs(db)
    except SQLAlchemyError as e:
        logger.error(f"List songs error: {e}")
        raise HTTPException(status_code=500, detail="無法讀取歌曲列表")

@router.post("", response_model=SongResponse)
async def create_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id)
):
    """
    Create a song in PRACTICING status.
    Each id in instrumentIds gets a progress row starting at 0.
    """
    try:
        return song_service.create_song(db, user_id, song_data)
    except IntegrityError as e:
        logger.error(f"Create song rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="無法建立歌曲，請確認使用者與樂器是否存在"
        )
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Create song error: {e}")
        raise HTTPException(status_code=500, detail="無法建立歌曲")

@router.patch("/{song_id}/status", response_model=SongResponse)
async def update_song_status(
    song_id: int,
    update_data: SongStatusUpdate,
    db: Session = Depends(get_db)
):
    """Set a song's status (PRACTICING or ARCHIVED)"""
    try:
        song = song_service.update_status(db, song_id, update_data.status)
    except SQLAlchemyError as e:
        logger.error(f"Update song status error: {e}")
        raise HTTPException(status_code=500, detail="無法更新歌曲狀態")
    if not song:
        raise HTTPException(status_code=404, detail=SONG_NOT_FOUND)
    return song

@router.delete("/{song_id}", response_model=SongResponse)
async def delete_song(song_id: int, db: Session = Depends(get_db)):
    """
    Soft delete a song: it is marked ARCHIVED and disappears from the list,
    but the row and its instruments are kept
    """
    try:
        song = song_service.archive_song(db, song_id)
    except SQLAlchemyError as e:
        logger.error(f"Archive song error: {e}")
        raise HTTPException(status_code=500, detail="無法刪除歌曲")
    if not song:
        raise HTTPException(status_code=404, detail=SONG_NOT_FOUND)
    return song
