"""Structure parser utilities.

Brace matching, class block extraction, language detection and the
parser registry.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import StructuralParser

logger = logging.getLogger(__name__)

# Extension → language mapping, checked in this order
SUPPORTED_EXTENSIONS: Dict[str, str] = {
    ".java": "java",
    ".php": "php",
    ".py": "python",
}

SUPPORTED_LANGUAGES = ("java", "php", "python")

NOT_FOUND = -1

_WHITESPACE_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Content heuristics (best effort, evaluated only when the filename is silent)
# ---------------------------------------------------------------------------

_JAVA_HINT_RES = (
    re.compile(r"\bclass\s+\w+\s*(?:extends|implements)"),
    # Trailing whitespace stays on the semicolon's own line
    re.compile(r";[^\S\n]*$", re.MULTILINE),
)

_PHP_HINT_RES = (
    re.compile(r"<\?php"),
    re.compile(r"\bfunction\s+\w+\s*\("),
)

_PYTHON_HINT_RES = (
    re.compile(r"^class\s+\w+\s*(\([^)]{0,1000}\))?:\s*$", re.MULTILINE),
    re.compile(r"^[ \t]*def\s+\w+\s*\(", re.MULTILINE),
)


@dataclass
class ClassBlock:
    """A class declaration located in brace-delimited source."""

    name: str
    header: str  # From the class keyword up to (excluding) the opening brace
    block: str  # From the opening brace through its matching closing brace


def find_matching_brace(text: str, open_index: int) -> int:
    """Find the closing brace that balances the first ``{`` at/after open_index.

    Braces inside string literals and comments are counted like any other.

    Args:
        text: Source text
        open_index: Offset of the opening brace (or any offset before it)

    Returns:
        Index of the matching ``}``, or NOT_FOUND if the text ends first
    """
    depth = 0
    for i in range(max(open_index, 0), len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return NOT_FOUND


def _brace_pairs(text: str) -> Dict[int, int]:
    """Map every balanced ``{`` offset to its closing ``}`` in one pass.

    Pairs agree with find_matching_brace; unclosed braces are absent.
    """
    pairs: Dict[int, int] = {}
    stack: List[int] = []
    for i, ch in enumerate(text):
        if ch == "{":
            stack.append(i)
        elif ch == "}" and stack:
            pairs[stack.pop()] = i
    return pairs


def extract_class_blocks(code: str, class_pattern: re.Pattern) -> List[ClassBlock]:
    """Locate every class declaration and its brace-delimited body.

    Declarations without a discoverable or balanced body are skipped.

    Args:
        code: Full source text
        class_pattern: Compiled pattern whose group 1 captures the class name

    Returns:
        ClassBlock list in source order
    """
    blocks: List[ClassBlock] = []
    pairs = _brace_pairs(code)
    for match in class_pattern.finditer(code):
        start = match.start()
        brace = code.find("{", start)
        if brace == NOT_FOUND:
            continue
        end = pairs.get(brace, NOT_FOUND)
        if end == NOT_FOUND:
            logger.debug(f"Unbalanced body for class {match.group(1)} at offset {start}, skipping")
            continue
        blocks.append(
            ClassBlock(
                name=match.group(1),
                header=code[start:brace],
                block=code[brace:end + 1],
            )
        )
    return blocks


def collapse_whitespace(text: Optional[str]) -> str:
    """Trim text and collapse internal whitespace runs to single spaces."""
    return _WHITESPACE_RE.sub(" ", (text or "").strip())


def split_names(text: Optional[str]) -> List[str]:
    """Comma-split a parent/interface list, dropping blank entries."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def detect_language_from_filename(filename: Optional[str]) -> str:
    """Map a filename extension to a language, or "" when unsupported."""
    if not filename:
        return ""
    lower = filename.lower()
    for ext, language in SUPPORTED_EXTENSIONS.items():
        if lower.endswith(ext):
            return language
    return ""


def detect_language(code: Optional[str], filename: Optional[str] = None) -> str:
    """Guess the language of a code sample.

    The filename extension wins when it is recognized. Otherwise each
    language's heuristics fill an independent slot and the first filled slot
    in java, php, python order is returned. Best effort only: a Python file
    with a trailing semicolon anywhere is reported as Java.

    Args:
        code: Source text (may be empty)
        filename: Original filename, if any

    Returns:
        "java", "php", "python", or "" when nothing matched
    """
    language = detect_language_from_filename(filename)
    if language or not code:
        return language

    java = "java" if any(p.search(code) for p in _JAVA_HINT_RES) else ""
    php = "php" if any(p.search(code) for p in _PHP_HINT_RES) else ""
    python = "python" if any(p.search(code) for p in _PYTHON_HINT_RES) else ""

    return java or php or python


def is_supported_language(language: Optional[str]) -> bool:
    """Check whether a language label has a dedicated parser."""
    return language in SUPPORTED_LANGUAGES


def get_parser(language: str) -> "StructuralParser":
    """Get a parser instance for the given language.

    Parsers hold no state, so a fresh instance is built per call.

    Args:
        language: Language identifier (e.g., "python")

    Returns:
        Parser instance

    Raises:
        ValueError: If language is not supported
    """
    if language == "java":
        from .java_parser import JavaParser
        return JavaParser()
    elif language == "php":
        from .php_parser import PhpParser
        return PhpParser()
    elif language == "python":
        from .python_parser import PythonParser
        return PythonParser()
    raise ValueError(
        f"Unsupported language: {language}. "
        f"Supported: {list(SUPPORTED_LANGUAGES)}"
    )
