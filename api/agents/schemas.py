"""
Pydantic schemas for agent endpoints.

The request models double as the validation rules for the write routes;
`Agent` only documents the rows returned by the list endpoint.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class CreateAgentRequest(BaseModel):
    AGENT_CODE: StrictStr
    AGENT_NAME: StrictStr


class UpdateAgentRequest(BaseModel):
    AGENT_NAME: StrictStr


class Agent(BaseModel):
    model_config = ConfigDict(extra="allow")

    AGENT_CODE: str
    AGENT_NAME: str
    WORKING_AREA: str | None = None
    COMMISSION: float | None = None
    PHONE_NO: str | None = None
    COUNTRY: str | None = None
