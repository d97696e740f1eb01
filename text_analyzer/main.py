from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Logging setup
from text_analyzer.logging_config import setup_logging
from text_analyzer.config import Settings

# Core services
from text_analyzer.services.analyzer import TextAnalyzer
from text_analyzer.services.cache import ResultCache
from text_analyzer.services.sentiment import SentimentClassifier
from text_analyzer.services.stopwords import StopwordFilter

# Routers
from text_analyzer.routes.analyze import router as analyze_router
from text_analyzer.routes.history import router as history_router
from text_analyzer.routes.health import router as health_router

logger = logging.getLogger(__name__)


# -----------------------------
# Lifespan Handler (startup/shutdown)
# -----------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Text Analyzer API starting (cache capacity=%d, remote sentiment=%s)",
        app.state.cache.max_size,
        "enabled" if app.state.analyzer.sentiment_classifier.remote else "disabled",
    )
    yield
    logger.info("Text Analyzer API shutting down (%d analyses discarded)", app.state.cache.get_total_count())


# -----------------------------
# Create FastAPI app
# -----------------------------
def create_app(settings: Optional[Settings] = None,
               sentiment_transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Build the app and the objects that live as long as the process:
    one analyzer and one result cache, shared by every request.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_dir, settings.log_level)

    app = FastAPI(
        title="Text Analyzer API",
        description="Word, character and sentence statistics with optional sentiment analysis.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.analyzer = TextAnalyzer(
        stopword_filter=StopwordFilter(path=settings.stopwords_path),
        sentiment_classifier=SentimentClassifier.from_settings(settings, transport=sentiment_transport),
    )
    app.state.cache = ResultCache(max_size=settings.cache_max_size)

    # Register routers
    app.include_router(analyze_router)
    app.include_router(history_router)
    app.include_router(health_router, prefix="/health", tags=["General"])

    # CORS (for development only)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],    # restrict in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["General"])
    def read_root():
        """A simple welcome endpoint."""
        return {"status": "ok", "message": "Text Analyzer API is running!", "documentation": "/docs"}

    return app

