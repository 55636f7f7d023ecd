"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator


class StartSessionRequest(BaseModel):
    topic: str = Field(..., min_length=1)

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topic must not be blank")
        return value


class StartSessionResponse(BaseModel):
    session_id: str
    menu: List[str]


class SelectionRequest(BaseModel):
    item: str = Field(..., min_length=1)


class MenuResponse(BaseModel):
    menu: List[str]


class SessionRead(BaseModel):
    session_id: str
    topic: str
    path: List[str]
    updated_at: datetime


class HealthResponse(BaseModel):
    status: str
    provider: str
