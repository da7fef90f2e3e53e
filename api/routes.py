"""
Health check and demo routes.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["misc"])

GREETING = "Hello! this is Jaturaput's World!"
DEMO_FRUITS = ["apple", "orange", "banana"]


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {"message": "API is healthy"}


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return GREETING


@router.get("/api")
async def demo_fruits() -> Dict[str, Any]:
    return {"fruits": list(DEMO_FRUITS)}
