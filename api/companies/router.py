"""
Companies API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from core import db, pipeline
from core.schemas import INTERNAL_ERROR

from . import repository

router = APIRouter(tags=["Companies"])


@router.get(
    "/companies",
    summary="Get a list of companies",
    description="Retrieve a list of companies.",
    response_description="A list of companies",
    response_model=list[dict[str, Any]],
    responses=INTERNAL_ERROR,
)
async def list_companies(pool: Any = Depends(db.get_pool)) -> Response:
    return await pipeline.handle(pool, repository.LIST_COMPANIES)
