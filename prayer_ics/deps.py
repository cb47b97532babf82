#!/usr/bin/env python3
"""Reusable FastAPI dependency functions."""

from typing import Annotated, AsyncIterator

import httpx
from fastapi import Depends

from prayer_ics.config import settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency — yields an AsyncClient for upstream calls, closed after the request."""
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client


HttpClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]
