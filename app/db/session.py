# ============================================================================
# FILE: app/db/session.py
# ============================================================================
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
import logging

logger = logging.getLogger(__name__)

def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ships with foreign keys off; switch them on for every connection"""

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, _connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine for the given URL with SQLite tweaks applied"""
    is_sqlite = url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=not is_sqlite, **kwargs)
    if is_sqlite:
        enable_sqlite_foreign_keys(engine)
    return engine

engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """FastAPI dependency: one session per request, always closed"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
