"""Parser API routes — structural extraction from pasted or uploaded code.

  POST    /parse    → structural model (classes, functions, relationships)
  OPTIONS /parse    → pre-flight
  POST    /diagram  → PlantUML class diagram for the same input
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import JSONResponse

from codesketch.core.diagrams import generate_class_diagram
from codesketch.setting import ServerSettings

from ..core import (
    CodeSubmission,
    analyze_submission,
    diagram_rejection,
    diagram_response,
    resolve_submission,
    success_response,
    validate_submission,
)
from ..deps import get_server_settings
from ..schemas import DiagramResponse, ParseResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parser"])


async def _read_submission(
    code: Optional[str],
    language: Optional[str],
    file: Optional[UploadFile],
    max_code_bytes: int,
) -> CodeSubmission:
    filename = None
    content = None
    if file is not None:
        filename = file.filename
        # One byte past the limit is enough to know the upload is too large
        content = await file.read(max_code_bytes + 1)
    return resolve_submission(
        code,
        language,
        filename=filename,
        file_content=content,
        max_upload_bytes=max_code_bytes,
    )


@router.options("/parse", status_code=204)
@router.options("/diagram", status_code=204)
async def preflight():
    """Answer pre-flight requests with no body."""
    return Response(status_code=204)


@router.post("/parse", response_model=ParseResponse)
async def parse_code(
    code: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    settings: ServerSettings = Depends(get_server_settings),
):
    """Extract classes, functions and relationships from source code.

    Accepts inline ``code`` and/or an uploaded ``file``; non-blank file
    content wins. ``language`` may be java, php or python; when omitted it
    is detected from the filename extension, then from the code itself.
    """
    submission = await _read_submission(code, language, file, settings.max_code_bytes)

    status, rejection = validate_submission(submission, settings.max_code_bytes)
    if rejection is not None:
        return JSONResponse(status_code=status, content=rejection)

    # Regex analysis is CPU-bound; keep it off the event loop
    analysis = await asyncio.to_thread(analyze_submission, submission)
    return success_response(analysis, submission.filename)


@router.post("/diagram", response_model=DiagramResponse)
async def parse_to_diagram(
    code: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    settings: ServerSettings = Depends(get_server_settings),
):
    """Render the extracted structure as a PlantUML class diagram."""
    submission = await _read_submission(code, language, file, settings.max_code_bytes)

    status, rejection = validate_submission(submission, settings.max_code_bytes)
    if rejection is not None:
        return JSONResponse(status_code=status, content=diagram_rejection(rejection))

    analysis = await asyncio.to_thread(analyze_submission, submission)
    plantuml = await asyncio.to_thread(generate_class_diagram, analysis.model)
    return diagram_response(analysis, plantuml, submission.filename)
