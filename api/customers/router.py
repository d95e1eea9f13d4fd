"""
Customers API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from core import db, pipeline
from core.schemas import INTERNAL_ERROR

from . import repository

router = APIRouter(tags=["Customers"])


@router.get(
    "/customers",
    summary="Get a list of customers",
    description="Retrieve a list of customers.",
    response_description="A list of customers",
    response_model=list[dict[str, Any]],
    responses=INTERNAL_ERROR,
)
async def list_customers(pool: Any = Depends(db.get_pool)) -> Response:
    return await pipeline.handle(pool, repository.LIST_CUSTOMERS)
