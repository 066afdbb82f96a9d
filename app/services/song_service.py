# ============================================================================
# FILE: app/services/song_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from app.db.models.song import Song, SongInstrument, SongStatus
from app.schemas.song import SongCreate
import logging

logger = logging.getLogger(__name__)

def _with_instruments(query):
    return query.options(
        selectinload(Song.instruments).selectinload(SongInstrument.instrument)
    )

class SongService:
    """Service layer for song operations"""

    def list_active_songs(self, db: Session) -> List[Song]:
        """All non-archived songs, newest first, with instruments loaded"""
        return _with_instruments(db.query(Song)).filter(
            Song.status != SongStatus.ARCHIVED
        ).order_by(Song.created_at.desc(), Song.id.desc()).all()

    def get_song(self, db: Session, song_id: int) -> Optional[Song]:
        """Get a single song with its instruments"""
        return _with_instruments(db.query(Song)).filter(Song.id == song_id).first()

    def create_song(self, db: Session, user_id: int, song_data: SongCreate) -> Song:
        """Create a song and one progress row (at 0) per catalog instrument id"""
        try:
            song = Song(
                title=song_data.title,
                artist=song_data.artist,
                youtube_url=song_data.youtube_url,
                user_id=user_id,
                status=SongStatus.PRACTICING,
                instruments=[
                    SongInstrument(instrument_id=instrument_id, progress=0)
                    for instrument_id in song_data.instrument_ids
                ],
            )
            db.add(song)
            db.commit()
            logger.info(f"Song created: {song.id} for user {user_id} "
                        f"({len(song_data.instrument_ids)} instruments)")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating song: {e}")
            raise
        return self.get_song(db, song.id)

    def update_status(self, db: Session, song_id: int, status: SongStatus) -> Optional[Song]:
        """Set a song's status; returns None if the song does not exist"""
        song = self.get_song(db, song_id)
        if not song:
            return None

        try:
            song.status = status
            db.commit()
            db.refresh(song)
            logger.info(f"Song {song_id} status -> {status.value}")
            return song
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating song status: {e}")
            raise

    def archive_song(self, db: Session, song_id: int) -> Optional[Song]:
        """Soft delete: the row and its instruments stay, only status changes"""
        return self.update_status(db, song_id, SongStatus.ARCHIVED)

# Create singleton instance
song_service = SongService()
