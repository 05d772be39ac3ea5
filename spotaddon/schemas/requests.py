"""
Request validation schemas using Pydantic.

Parameters may arrive in the query string or in a JSON body, so every
schema accepts both the wire name (``deviceId``) and the Python name.
"""

from pydantic import BaseModel, Field, field_validator


class _RequestBase(BaseModel):
    class Config:
        extra = "ignore"
        populate_by_name = True

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        """Treat blank strings like missing values."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class SearchRequest(_RequestBase):
    """Parameters for GET /search."""

    query: str = Field(..., min_length=1)


class PlayRequest(_RequestBase):
    """Parameters for /play."""

    uri: str = Field(..., min_length=1)
    device_id: str = Field(..., min_length=1, alias="deviceId")


class StopRequest(_RequestBase):
    """Parameters for /stop."""

    device_id: str = Field(..., min_length=1, alias="deviceId")


class CallbackRequest(_RequestBase):
    """Query parameters Spotify sends to /callback."""

    code: str = Field(..., min_length=1)
