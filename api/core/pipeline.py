"""
Request pipeline shared by every table route.

Per request: validate the body (if the route names a body model), acquire one
pooled connection, run the route's single statement, release the connection,
then shape the response. `run` never raises for validation or database
problems; it returns an `Outcome` and `to_response` is the one place that
turns outcomes into HTTP responses and logs failures.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from . import db
from .validation import FieldError, validate_body

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}
NO_POOL_MESSAGE = "DB pool is not initialized. Call init_pool() on startup."


class OutcomeKind(str, Enum):
    OK = "ok"
    VALIDATION_FAILURE = "validation_failure"
    OPERATION_FAILURE = "operation_failure"


@dataclass(frozen=True)
class Route:
    name: str
    query: str | None = None
    body_model: type[BaseModel] | None = None
    confirmation: str | None = None


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    rows: list[dict[str, Any]] | None = None
    errors: list[FieldError] = field(default_factory=list)
    error: BaseException | None = None


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON; empty or malformed bodies become None
    and are reported by validation as missing fields.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        return None


async def run(pool: Any, route: Route, body: Any = None, args: tuple[Any, ...] = ()) -> Outcome:
    if route.body_model is not None:
        errors = validate_body(body, route.body_model)
        if errors:
            return Outcome(OutcomeKind.VALIDATION_FAILURE, errors=errors)

    if route.query is None:
        return Outcome(OutcomeKind.OK)

    if pool is None:
        return Outcome(OutcomeKind.OPERATION_FAILURE, error=RuntimeError(NO_POOL_MESSAGE))

    try:
        async with pool.acquire() as conn:
            rows = await db.fetch_all(conn, route.query, *args)
    except Exception as exc:
        return Outcome(OutcomeKind.OPERATION_FAILURE, error=exc)
    return Outcome(OutcomeKind.OK, rows=rows)


def to_response(route: Route, outcome: Outcome) -> Response:
    if outcome.kind is OutcomeKind.VALIDATION_FAILURE:
        logger.info(
            "request_rejected route=%s fields=%s",
            route.name,
            ",".join(e.field for e in outcome.errors),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [e.as_dict() for e in outcome.errors]},
        )

    if outcome.kind is OutcomeKind.OPERATION_FAILURE:
        logger.error("route_failed route=%s", route.name, exc_info=outcome.error)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )

    if outcome.rows is not None:
        return JSONResponse(content=jsonable_encoder(outcome.rows))
    return PlainTextResponse(route.confirmation or "OK")


async def handle(pool: Any, route: Route, body: Any = None, args: tuple[Any, ...] = ()) -> Response:
    outcome = await run(pool, route, body, args)
    return to_response(route, outcome)
