import os

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.init_db import init_db, seed_instruments
from app.db.models.user import User
from app.db.session import build_engine, get_db
from app.main import app

engine = build_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    init_db(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def demo_user(db_session):
    user = User(id=1, username="demo", email="demo@gmail.com", password_hash="secret")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def catalog(db_session):
    """Guitar, Bass, Drums keyed by name"""
    instruments = seed_instruments(db_session, ["Guitar", "Bass", "Drums"])
    return {i.name: i for i in instruments}


class FakeCatalogCache:
    """In-memory stand-in for app.core.cache.CatalogCache"""

    def __init__(self, items=None):
        self.items = items
        self.writes = 0
        self.clears = 0

    def get_catalog(self):
        return self.items

    def set_catalog(self, items):
        self.items = items
        self.writes += 1
        return True

    def clear_catalog(self):
        self.items = None
        self.clears += 1
        return True


@pytest.fixture
def fake_catalog_cache(monkeypatch):
    fake = FakeCatalogCache()
    monkeypatch.setattr("app.services.instrument_service.catalog_cache", fake)
    return fake


@pytest.fixture
def startup_db(monkeypatch, db_session):
    """Point the startup hook's engine and session factory at the test database"""
    monkeypatch.setattr("app.db.session.engine", engine)
    monkeypatch.setattr("app.db.session.SessionLocal", TestingSessionLocal)
    return db_session
