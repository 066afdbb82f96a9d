# ============================================================================
# FILE: app/db/models/song.py
# ============================================================================
import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

class SongStatus(str, enum.Enum):
    PRACTICING = "PRACTICING"
    ARCHIVED = "ARCHIVED"

class Song(Base):
    """A song a user is learning"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False)
    youtube_url = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(Enum(SongStatus, name="song_status"), nullable=False, default=SongStatus.PRACTICING)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="songs")
    instruments = relationship("SongInstrument", back_populates="song", order_by="SongInstrument.id")

class DefinedInstrument(Base):
    """Catalog of instruments a song can be practiced on"""
    __tablename__ = "defined_instruments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

class SongInstrument(Base):
    """Practice progress (0-100) of one instrument on one song"""
    __tablename__ = "song_instruments"

    id = Column(Integer, primary_key=True, index=True)
    song_id = Column(Integer, ForeignKey("songs.id"), nullable=False, index=True)
    instrument_id = Column(Integer, ForeignKey("defined_instruments.id"), nullable=False)
    progress = Column(Integer, nullable=False, default=0)

    # Relationships
    song = relationship("Song", back_populates="instruments")
    instrument = relationship("DefinedInstrument")
