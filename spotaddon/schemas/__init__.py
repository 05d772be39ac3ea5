"""
Pydantic schemas for request validation.
"""

from pydantic import ValidationError

from .requests import (
    SearchRequest,
    PlayRequest,
    StopRequest,
    CallbackRequest,
)

__all__ = [
    "ValidationError",
    "SearchRequest",
    "PlayRequest",
    "StopRequest",
    "CallbackRequest",
]
