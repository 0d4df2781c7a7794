"""FastAPI application bootstrap."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging import register_middleware, setup_logging
from .core.security import enable_cors
from .routers import health, news_score
from .services.score_service import score_service

setup_logging(settings.log_level)

logger = logging.getLogger("newsscore")


@asynccontextmanager
async def lifespan(_: FastAPI):
    # A ConfigError here aborts startup before any request is served.
    catalogue = score_service.load()
    logger.info("NEWS score API ready with types: %s", ", ".join(catalogue.names))
    yield


app = FastAPI(title="NEWS Score API", version=settings.api_version, lifespan=lifespan)

register_middleware(app)
register_exception_handlers(app)
enable_cors(app)

app.include_router(health.router)
app.include_router(news_score.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "NEWS Score API", "health": "/health"}
