"""Java structural parser — regex-based.

Extracts classes, fields, methods, and extends/implements relationships
from Java source. Class bodies are found by brace matching; members are
matched anywhere inside the body, so inner-class and local-block lines that
happen to look like declarations are reported too.
"""

import logging
import re

from .models import AttributeInfo, ClassInfo, MethodInfo, StructuralModel
from .utils import collapse_whitespace, extract_class_blocks, split_names

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# class <Name> ... {   (header scan is bounded so an unclosed header stays linear)
_CLASS_RE = re.compile(r"\bclass\s+(\w+)\b[^{]{0,1000}\{")

_EXTENDS_RE = re.compile(r"\bextends\s+(\w+)")

# implements A, B<T>, C   (up to the opening brace)
_IMPLEMENTS_RE = re.compile(r"\bimplements\s+([^{]+)")

# (visibility) [static] Type name [= init];
_FIELD_RE = re.compile(
    r"\b(public|private|protected)\s+(?:static\s+)?"
    r"([\w<>\[\]]+)\s+"              # type
    r"(\w+)\s*"                      # field name
    r"(?:=[^;]{1,1000})?;",
    re.MULTILINE,
)

# [visibility] [static] [ReturnType] name(params) {
# Every whitespace run sits between two mandatory tokens, so a run can only
# be consumed one way. Matches never start inside a token.
_METHOD_RE = re.compile(
    r"(?<![\w<>\[\]])"
    r"(?:(public|private|protected)\s+)?(?:static\s+)?"
    r"(?:([\w<>\[\]]+)\s+)?"         # return type
    r"(?<=\s)(\w+)\s*"               # method name
    r"\(([^)]{0,1000})\)\s*\{",
    re.MULTILINE,
)


class JavaParser:
    """Regex-based Java parser.

    Extracts:
    - Class declarations (header + brace block)
    - Fields with an explicit visibility modifier
    - Method-shaped declarations followed by a body
    - extends / implements edges
    """

    language = "java"

    def parse(self, code: str) -> StructuralModel:
        model = StructuralModel()

        for block in extract_class_blocks(code, _CLASS_RE):
            extends_match = _EXTENDS_RE.search(block.header)
            implements_match = _IMPLEMENTS_RE.search(block.header)

            model.add_class(
                ClassInfo(
                    name=block.name,
                    attributes=self._extract_fields(block.block),
                    methods=self._extract_methods(block.block),
                    extends=extends_match.group(1) if extends_match else None,
                    implements=split_names(implements_match.group(1)) if implements_match else [],
                )
            )

        logger.debug(f"Java: {len(model.classes)} classes, {len(model.relationships)} relationships")
        return model

    @staticmethod
    def _extract_fields(body: str) -> list[AttributeInfo]:
        return [
            AttributeInfo(name=m.group(3), type=m.group(2), visibility=m.group(1))
            for m in _FIELD_RE.finditer(body)
        ]

    @staticmethod
    def _extract_methods(body: str) -> list[MethodInfo]:
        methods = []
        for m in _METHOD_RE.finditer(body):
            methods.append(
                MethodInfo(
                    name=m.group(3),
                    params=collapse_whitespace(m.group(4)),
                    returns=(m.group(2) or "").strip(),
                    visibility=(m.group(1) or "").strip() or "public",
                )
            )
        return methods
