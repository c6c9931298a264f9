"""
Albums API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Returned by AlbumService and the route handlers.

Schemas are separate from the SQLAlchemy model: the API exposes `date`
while the table stores `release_date`, and the id is never accepted as input.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from albums_api.models.album import ARTIST_MAX_LENGTH, NAME_MAX_LENGTH


# ══════════════════════════════════════════════════════════════════════════
# Album Models
# ══════════════════════════════════════════════════════════════════════════


class AlbumResponse(BaseModel):
    """
    What:  Full representation of an album.
    Who:   Returned by GET /albums, GET /albums/{id}, GET /albums/{artist}
           and POST /albums.

    Example:
        {"id": 1, "name": "OK Computer", "artist": "Radiohead", "date": "1997-05-21"}
    """
    id: int = Field(description="Server-generated album identifier")
    name: str = Field(description="Album title")
    artist: str = Field(description="Performing artist")
    date: datetime.date = Field(description="Release date (ISO 8601)")

    model_config = {"from_attributes": True}


class AlbumCreate(BaseModel):
    """
    What:  Request body for POST /albums.

    Constraints:
        name:   1-100 characters, not blank
        artist: 1-50 characters, not blank
        date:   must lie strictly before today, checked by AlbumService
                because "today" is evaluated when the album is written
    """
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH, description="Album title")
    artist: str = Field(min_length=1, max_length=ARTIST_MAX_LENGTH, description="Performing artist")
    date: datetime.date = Field(description="Release date (ISO 8601), must be in the past")

    @field_validator("name", "artist")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body for 400 and 500 responses.

    The 422 "album does not exist" response uses ExceptionMessage instead
    (see albums_api.schemas.messages).

    Example:
        {
            "error": "validation_error",
            "message": "Release date must be in the past",
            "details": {"field": "date"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
