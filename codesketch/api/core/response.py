"""Response envelope builders shared by the HTTP routes and the CLI.

Every parse response has the same envelope:
    {success, message, result, languageDetected, filename}
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from codesketch.core.constants import (
    MESSAGE_NO_CODE,
    MESSAGE_NOTHING_DETECTED,
    MESSAGE_OK,
    MESSAGE_TOO_LARGE,
)
from codesketch.core.structure_parser import AnalysisResult, analyze, detect_language

logger = logging.getLogger(__name__)


@dataclass
class CodeSubmission:
    """Code received from a client, after upload/inline resolution."""

    code: str
    language: str  # Lower-cased, trimmed; "" when not given
    filename: Optional[str] = None
    truncated: bool = False  # Upload was cut off at the read limit


def resolve_submission(
    code: Optional[str],
    language: Optional[str],
    filename: Optional[str] = None,
    file_content: Optional[bytes] = None,
    max_upload_bytes: Optional[int] = None,
) -> CodeSubmission:
    """Combine inline code with an optional uploaded file.

    Non-blank uploaded content replaces the inline code. Content longer
    than ``max_upload_bytes`` always wins and marks the submission as
    truncated so validation rejects it.
    """
    resolved = code or ""
    truncated = False
    if file_content is not None:
        text = file_content.decode("utf-8", errors="replace")
        truncated = max_upload_bytes is not None and len(file_content) > max_upload_bytes
        if truncated or text.strip():
            resolved = text
    return CodeSubmission(
        code=resolved,
        language=(language or "").strip().lower(),
        filename=filename or None,
        truncated=truncated,
    )


def _result_message(analysis: AnalysisResult) -> str:
    return MESSAGE_NOTHING_DETECTED if analysis.model.is_empty() else MESSAGE_OK


def success_response(
    analysis: AnalysisResult, filename: Optional[str] = None
) -> Dict[str, Any]:
    """Build the success envelope for an analysis."""
    return {
        "success": True,
        "message": _result_message(analysis),
        "result": analysis.model.to_dict(),
        "languageDetected": analysis.language,
        "filename": filename,
    }


def diagram_response(
    analysis: AnalysisResult, plantuml: str, filename: Optional[str] = None
) -> Dict[str, Any]:
    """Build the diagram envelope: the parse envelope with ``plantuml`` in place of ``result``."""
    return {
        "success": True,
        "message": _result_message(analysis),
        "plantuml": plantuml,
        "languageDetected": analysis.language,
        "filename": filename,
    }


def diagram_rejection(envelope: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a rejection envelope into its diagram shape."""
    rejected = {k: v for k, v in envelope.items() if k != "result"}
    rejected["plantuml"] = None
    return rejected


def error_response(
    message: str,
    language: Optional[str] = None,
    filename: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a failure envelope."""
    return {
        "success": False,
        "message": message,
        "result": None,
        "languageDetected": language or None,
        "filename": filename,
    }


def validate_submission(
    submission: CodeSubmission, max_code_bytes: int
) -> tuple[Optional[int], Optional[Dict[str, Any]]]:
    """Reject blank or oversized code before analysis.

    Returns:
        (status_code, envelope) when rejected, (None, None) when acceptable
    """
    if submission.truncated:
        logger.warning(f"Rejected request: upload exceeds limit of {max_code_bytes} bytes")
        return 413, _too_large(submission, max_code_bytes)

    if not submission.code.strip():
        detected = submission.language or detect_language(submission.code, submission.filename)
        logger.info("Rejected request: no code provided")
        return 200, error_response(MESSAGE_NO_CODE, detected, submission.filename)

    size = len(submission.code.encode("utf-8"))
    if size > max_code_bytes:
        logger.warning(f"Rejected request: {size} bytes exceeds limit of {max_code_bytes}")
        return 413, _too_large(submission, max_code_bytes)

    return None, None


def _too_large(submission: CodeSubmission, max_code_bytes: int) -> Dict[str, Any]:
    return error_response(
        MESSAGE_TOO_LARGE.format(limit=max_code_bytes),
        submission.language,
        submission.filename,
    )


def analyze_submission(submission: CodeSubmission) -> AnalysisResult:
    """Run the structural analysis for an accepted submission."""
    return analyze(submission.code, submission.language, submission.filename)
