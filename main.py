# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from groupsplit.api.routers import groups
from groupsplit.config.logging import configure_logging
from groupsplit.config.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting %s (env=%s)", settings.service_name, settings.ENV)
    yield
    logger.info("Shutdown complete")


app = FastAPI(title="Group Splitter", lifespan=lifespan)

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(groups.router, prefix="/api/v1/groups", tags=["groups"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": settings.service_name, "env": settings.ENV}
