# ============================================================================
# FILE: app/services/instrument_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from app.db.models.song import DefinedInstrument, SongInstrument
from app.schemas.instrument import DefinedInstrumentResponse
from app.core.cache import catalog_cache
import logging

logger = logging.getLogger(__name__)

class InstrumentService:
    """Service layer for the instrument catalog and practice progress"""

    def list_catalog(self, db: Session) -> List[dict]:
        """Every defined instrument, cached in Redis when available"""
        cached = catalog_cache.get_catalog()
        if cached is not None:
            logger.debug("Instrument catalog served from cache")
            return cached

        instruments = db.query(DefinedInstrument).order_by(DefinedInstrument.id).all()
        catalog = [DefinedInstrumentResponse.model_validate(i).model_dump() for i in instruments]
        # An empty catalog is not cached so rows added later show up right away
        if catalog:
            catalog_cache.set_catalog(catalog)
        return catalog

    def invalidate_catalog(self) -> None:
        catalog_cache.clear_catalog()

    def get_song_instrument(self, db: Session, song_instrument_id: int) -> Optional[SongInstrument]:
        return db.query(SongInstrument).options(
            joinedload(SongInstrument.instrument)
        ).filter(SongInstrument.id == song_instrument_id).first()

    def update_progress(self, db: Session, song_instrument_id: int, progress: int) -> Optional[SongInstrument]:
        """Store progress as given; values outside 0-100 are not clamped"""
        song_instrument = self.get_song_instrument(db, song_instrument_id)
        if not song_instrument:
            return None

        try:
            song_instrument.progress = progress
            db.commit()
            db.refresh(song_instrument)
            logger.info(f"Progress updated: song_instrument {song_instrument_id} -> {progress}")
            return song_instrument
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating progress: {e}")
            raise

# Create singleton instance
instrument_service = InstrumentService()
