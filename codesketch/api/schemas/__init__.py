"""API request/response schemas."""

from .parse import DiagramResponse, ParseResponse

__all__ = ["DiagramResponse", "ParseResponse"]
