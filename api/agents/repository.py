"""
Agent routes: SQL and body models.

Write routes carry no statement yet; they validate and confirm only.
"""

from __future__ import annotations

from core.pipeline import Route

from .schemas import CreateAgentRequest, UpdateAgentRequest

LIST_AGENTS = Route(name="list_agents", query="SELECT * FROM agents")

CREATE_AGENT = Route(
    name="create_agent",
    body_model=CreateAgentRequest,
    confirmation="Agent created successfully",
)

UPDATE_AGENT = Route(
    name="update_agent",
    body_model=UpdateAgentRequest,
    confirmation="Agent updated successfully",
)

REPLACE_AGENT = Route(
    name="replace_agent",
    body_model=UpdateAgentRequest,
    confirmation="Agent replaced successfully",
)

DELETE_AGENT = Route(name="delete_agent", confirmation="Agent deleted successfully")
