#!/usr/bin/env python3
"""Prayer ICS FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prayer_ics.config import settings
from prayer_ics.routes import prayers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving prayer feeds from %s", settings.aladhan_base_url)
    yield


app = FastAPI(
    title="Prayer ICS",
    description="iCalendar feed of Islamic prayer times computed by AlAdhan",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(prayers.router)


@app.get("/healthz")
def health() -> dict:
    return {"status": "ok", "upstream": settings.aladhan_base_url}
