"""
Agent API endpoints.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import Response

from core import db, pipeline
from core.schemas import BAD_REQUEST, INTERNAL_ERROR, PLAIN_TEXT_OK
from core.validation import request_body_schema

from . import repository, schemas

router = APIRouter(tags=["Agents"])

AgentId = Annotated[str, Path(description="ID of the agent")]


@router.get(
    "/agents",
    summary="Get a list of agents",
    response_description="Successful response with a list of agents",
    response_model=list[schemas.Agent],
    responses=INTERNAL_ERROR,
)
async def list_agents(pool: Any = Depends(db.get_pool)) -> Response:
    return await pipeline.handle(pool, repository.LIST_AGENTS)


@router.post(
    "/agents",
    summary="Create a new agent",
    response_description="Agent created successfully",
    responses={**PLAIN_TEXT_OK, **BAD_REQUEST, **INTERNAL_ERROR},
    openapi_extra=request_body_schema(schemas.CreateAgentRequest),
)
async def create_agent(request: Request, pool: Any = Depends(db.get_pool)) -> Response:
    body = await pipeline.read_json_body(request)
    return await pipeline.handle(pool, repository.CREATE_AGENT, body)


@router.patch(
    "/agents/{agent_id}",
    summary="Update an agent by ID",
    response_description="Agent updated successfully",
    responses={**PLAIN_TEXT_OK, **BAD_REQUEST, **INTERNAL_ERROR},
    openapi_extra=request_body_schema(schemas.UpdateAgentRequest),
)
async def update_agent(
    request: Request,
    agent_id: AgentId,
    pool: Any = Depends(db.get_pool),
) -> Response:
    body = await pipeline.read_json_body(request)
    return await pipeline.handle(pool, repository.UPDATE_AGENT, body, (agent_id,))


@router.put(
    "/agents/{agent_id}",
    summary="Replace an agent",
    description="Replace an agent by ID.",
    response_description="Agent replaced successfully",
    responses={**PLAIN_TEXT_OK, **BAD_REQUEST, **INTERNAL_ERROR},
    openapi_extra=request_body_schema(schemas.UpdateAgentRequest),
)
async def replace_agent(
    request: Request,
    agent_id: AgentId,
    pool: Any = Depends(db.get_pool),
) -> Response:
    body = await pipeline.read_json_body(request)
    return await pipeline.handle(pool, repository.REPLACE_AGENT, body, (agent_id,))


@router.delete(
    "/agents/{agent_id}",
    summary="Delete an agent",
    description="Delete an agent by ID.",
    response_description="Agent deleted successfully",
    responses={**PLAIN_TEXT_OK, **INTERNAL_ERROR},
)
async def delete_agent(agent_id: AgentId, pool: Any = Depends(db.get_pool)) -> Response:
    return await pipeline.handle(pool, repository.DELETE_AGENT, args=(agent_id,))
