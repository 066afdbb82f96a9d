# ============================================================================
# FILE: app/db/init_db.py
# ============================================================================
from typing import Iterable, List
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from app.db.base import Base
from app.db.models import song, user  # noqa: F401  (register tables on Base)
from app.db.models.song import DefinedInstrument
import logging

logger = logging.getLogger(__name__)

def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)

def seed_instruments(db: Session, names: Iterable[str]) -> List[DefinedInstrument]:
    """Insert catalog instruments whose names are missing; safe to run repeatedly"""
    existing = {name for (name,) in db.query(DefinedInstrument.name).all()}
    created = []
    for name in names:
        if name in existing:
            continue
        instrument = DefinedInstrument(name=name)
        db.add(instrument)
        created.append(instrument)
        existing.add(name)

    if not created:
        return []

    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding instruments: {e}")
        raise

    logger.info(f"Seeded instruments: {', '.join(i.name for i in created)}")
    return created
