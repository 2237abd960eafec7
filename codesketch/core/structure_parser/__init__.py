"""CodeSketch structure parser — regex/heuristic class extraction.

Public API:
    analyze(code, language, filename) → AnalysisResult
    parse_source(code, language) → StructuralModel
    detect_language(code, filename) → str
"""

import logging
from typing import Optional

from .base import StructuralParser
from .models import (
    AnalysisResult,
    AttributeInfo,
    ClassInfo,
    FunctionInfo,
    MethodInfo,
    RelationshipInfo,
    StructuralModel,
)
from .utils import (
    SUPPORTED_LANGUAGES,
    detect_language,
    extract_class_blocks,
    find_matching_brace,
    get_parser,
    is_supported_language,
)

logger = logging.getLogger(__name__)

__all__ = [
    "analyze",
    "parse_source",
    "merge_results",
    "detect_language",
    "find_matching_brace",
    "extract_class_blocks",
    "get_parser",
    "SUPPORTED_LANGUAGES",
    "StructuralParser",
    "AnalysisResult",
    "AttributeInfo",
    "ClassInfo",
    "FunctionInfo",
    "MethodInfo",
    "RelationshipInfo",
    "StructuralModel",
]


def merge_results(*models: StructuralModel) -> StructuralModel:
    """Concatenate structural models in the given order, without de-duplication."""
    merged = StructuralModel()
    for model in models:
        merged.classes.extend(model.classes)
        merged.functions.extend(model.functions)
        merged.relationships.extend(model.relationships)
    return merged


def parse_source(code: str, language: Optional[str] = None) -> StructuralModel:
    """Parse source code with one parser, or with all of them when unknown.

    Args:
        code: Source code as string
        language: "java", "php" or "python". Anything else (including None)
            runs every parser and merges the results in java, php, python order.

    Returns:
        StructuralModel for the code
    """
    if is_supported_language(language):
        return get_parser(language).parse(code)

    logger.debug(f"No parser for language {language!r}, merging all parsers")
    return merge_results(*(get_parser(lang).parse(code) for lang in SUPPORTED_LANGUAGES))


def analyze(
    code: str,
    language: Optional[str] = None,
    filename: Optional[str] = None,
) -> AnalysisResult:
    """Detect the language (unless given) and extract the structural model.

    Args:
        code: Source code as string
        language: Language hint; used as-is when non-empty
        filename: Original filename, used for extension-based detection

    Returns:
        AnalysisResult with the model and the language label to report.
        The label is None when nothing was supplied and detection failed.
    """
    code = code or ""
    language = (language or "").strip().lower()
    if not language:
        language = detect_language(code, filename)

    model = parse_source(code, language)
    logger.info(
        f"Analyzed {len(code)} chars as {language or 'unknown'}: "
        f"{len(model.classes)} classes, {len(model.functions)} functions"
    )
    return AnalysisResult(model=model, language=language or None)
