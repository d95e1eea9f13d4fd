"""
Pydantic schemas for the error bodies every route can return (docs only).
"""

from __future__ import annotations

from pydantic import BaseModel


class FieldErrorItem(BaseModel):
    field: str
    message: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    errors: list[FieldErrorItem]


class ErrorResponse(BaseModel):
    error: str


BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Invalid request data"}}
INTERNAL_ERROR = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}
PLAIN_TEXT_OK = {200: {"content": {"text/plain": {"schema": {"type": "string"}}}}}
