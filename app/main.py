# ============================================================================
# FILE: app/main.py
# ============================================================================
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.api.v1.router import api_router
from app.api.error_handlers import register_error_handlers
from app.core.logging import setup_logging
from app.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="GrooveLog API",
    description="Track the songs you are learning and your practice progress per instrument",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes live at the root: /songs, /instruments, /users
app.include_router(api_router)

@app.on_event("startup")
async def startup_event():
    """Create tables and seed the instrument catalog"""
    logger.info(f"Starting {settings.APP_NAME} API")
    from app.db.init_db import init_db, seed_instruments
    from app.db.session import engine, SessionLocal
    from app.services.instrument_service import instrument_service

    init_db(engine)
    if not settings.SEED_ON_STARTUP:
        return

    db = SessionLocal()
    try:
        if seed_instruments(db, settings.SEED_INSTRUMENTS):
            instrument_service.invalidate_catalog()
    finally:
        db.close()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME} API")

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "🎸 GrooveLog API is running! Let's Rock!"

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
