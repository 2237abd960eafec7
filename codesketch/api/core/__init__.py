"""API Core - Shared utilities for API routes.

This package provides:
- Submission intake (inline code vs uploaded file)
- Unified response builders (success_response, diagram_response, error_response)

Usage:
    from codesketch.api.core import resolve_submission, success_response
"""

from .response import (
    CodeSubmission,
    analyze_submission,
    diagram_rejection,
    diagram_response,
    error_response,
    resolve_submission,
    success_response,
    validate_submission,
)

__all__ = [
    "CodeSubmission",
    "analyze_submission",
    "diagram_rejection",
    "diagram_response",
    "error_response",
    "resolve_submission",
    "success_response",
    "validate_submission",
]
