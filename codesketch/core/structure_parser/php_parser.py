"""PHP structural parser — regex-based.

Same brace-block strategy as the Java parser. Only single inheritance
(``extends``) is read; ``implements`` clauses are ignored.
"""

import logging
import re

from .models import AttributeInfo, ClassInfo, FunctionInfo, MethodInfo, StructuralModel
from .utils import collapse_whitespace, extract_class_blocks

logger = logging.getLogger(__name__)

_CLASS_RE = re.compile(r"\bclass\s+(\w+)\b[^{]{0,1000}\{")

_EXTENDS_RE = re.compile(r"\bextends\s+(\w+)")

# (visibility) [static] $name [= init];
_PROPERTY_RE = re.compile(
    r"\b(public|protected|private)\s+(?:static\s+)?\$(\w+)\s*(?:=[^;]{1,1000})?;",
    re.MULTILINE,
)

# [visibility] [static] function name(params)
_METHOD_RE = re.compile(
    r"(?:\b(public|protected|private)\s+)?(?:\bstatic\s+)?"
    r"\bfunction\s+(\w+)\s*\(([^)]{0,1000})\)",
    re.MULTILINE,
)

# function name(params) at the start of a line. Not scope-aware: an indented
# function inside a class body also matches.
_FUNCTION_RE = re.compile(r"^[ \t]*function\s+(\w+)\s*\(([^)]{0,1000})\)", re.MULTILINE)


class PhpParser:
    """Regex-based PHP parser.

    Properties keep their ``$`` sigil in the reported name.
    """

    language = "php"

    def parse(self, code: str) -> StructuralModel:
        model = StructuralModel()

        for block in extract_class_blocks(code, _CLASS_RE):
            extends_match = _EXTENDS_RE.search(block.header)
            attributes = [
                AttributeInfo(name=f"${m.group(2)}", type="", visibility=m.group(1))
                for m in _PROPERTY_RE.finditer(block.block)
            ]
            methods = [
                MethodInfo(
                    name=m.group(2),
                    params=collapse_whitespace(m.group(3)),
                    returns="",
                    visibility=(m.group(1) or "").strip() or "public",
                )
                for m in _METHOD_RE.finditer(block.block)
            ]
            model.add_class(
                ClassInfo(
                    name=block.name,
                    attributes=attributes,
                    methods=methods,
                    extends=extends_match.group(1) if extends_match else None,
                )
            )

        for m in _FUNCTION_RE.finditer(code):
            model.functions.append(
                FunctionInfo(name=m.group(1), params=collapse_whitespace(m.group(2)), returns="")
            )

        logger.debug(f"PHP: {len(model.classes)} classes, {len(model.functions)} functions")
        return model
