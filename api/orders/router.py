"""
Orders API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from core import db, pipeline
from core.schemas import INTERNAL_ERROR

from . import repository

router = APIRouter(tags=["Orders"])


@router.get(
    "/orders",
    summary="Get a list of orders",
    description="Retrieve a list of orders.",
    response_description="A list of orders",
    response_model=list[dict[str, Any]],
    responses=INTERNAL_ERROR,
)
async def list_orders(pool: Any = Depends(db.get_pool)) -> Response:
    return await pipeline.handle(pool, repository.LIST_ORDERS)
