"""
Todo API — Pydantic Request/Response Schemas
=============================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Used by route handlers (transport shape) and by the gateway (input shape).

Envelope convention:
    status = "success"  the operation did what was asked
    status = "fail"     an expected domain condition (not found, conflict, validation)
    status = "error"    an unexpected internal condition
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

EnvelopeStatus = Literal["success", "fail", "error"]


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class TodoCreate(BaseModel):
    """
    Body of POST /todo.

    `category` may be omitted; the gateway stores "" in that case.
    `published` is not accepted on create; the store defaults it to false.
    """
    title: str = Field(min_length=1, description="Unique title, stored exactly as sent")
    content: str = Field(description="Body text of the todo")
    category: Optional[str] = Field(default=None, description="Free-form category")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Buy groceries",
                "content": "Milk, eggs, bread",
                "category": "home",
            }
        }
    }

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Rejects whitespace-only titles; any other title is kept verbatim."""
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class TodoUpdate(BaseModel):
    """
    Body of PATCH /todo/{id}.

    Every field is optional. A field that is omitted or sent as null keeps
    the value currently stored.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    category: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("title must not be blank")
        return v

    def provided_fields(self) -> Dict[str, Any]:
        """Fields that carry a replacement value."""
        return self.model_dump(exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class TodoResponse(BaseModel):
    """Full representation of a stored Todo."""
    id: uuid.UUID = Field(description="Store-generated identifier (UUID)")
    title: str
    content: str
    category: str = Field(default="", description="Empty string when not set")
    published: bool = Field(default=False)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("category", mode="before")
    @classmethod
    def category_not_null(cls, v: Optional[str]) -> str:
        return "" if v is None else v

    @field_validator("published", mode="before")
    @classmethod
    def published_not_null(cls, v: Optional[bool]) -> bool:
        return False if v is None else v


class TodoData(BaseModel):
    todo: TodoResponse


class NoteData(BaseModel):
    note: TodoResponse


class TodoEnvelope(BaseModel):
    """Returned by POST /todo (201) and GET /todo/{id}."""
    status: EnvelopeStatus = "success"
    data: TodoData


class NoteEnvelope(BaseModel):
    """Returned by PATCH /todo/{id}."""
    status: EnvelopeStatus = "success"
    data: NoteData


class TodoListResponse(BaseModel):
    """Returned by GET /todos."""
    status: EnvelopeStatus = "success"
    results: int = Field(description="Number of items in `todo`")
    todo: List[TodoResponse]


class MessageResponse(BaseModel):
    """
    Envelope carrying a message instead of data.

    Used for the health check and for every fail/error outcome.
    """
    status: EnvelopeStatus
    message: str


class HealthResponse(MessageResponse):
    status: EnvelopeStatus = "success"
