"""Python structural parser — regex-based.

Python has no braces, so a class body is taken to be everything between its
header line and the next line-start ``class`` declaration (or end of text).
Anything indented in that span is attributed to the class.
"""

import logging
import re

from .models import AttributeInfo, ClassInfo, FunctionInfo, MethodInfo, StructuralModel
from .utils import collapse_whitespace, split_names

logger = logging.getLogger(__name__)

# class Name(Base1, Base2):   (header must be the whole line)
_CLASS_RE = re.compile(r"^class\s+(\w+)\s*(\(([^)]{0,1000})\))?:\s*$", re.MULTILINE)

_NEXT_CLASS_RE = re.compile(r"^class\s+\w+", re.MULTILINE)

_METHOD_RE = re.compile(r"^[ \t]+def\s+(\w+)\s*\(([^)]{0,1000})\)\s*:", re.MULTILINE)

# self.attr = ...   (every occurrence, including repeats)
_ATTRIBUTE_RE = re.compile(r"^[ \t]+self\.(\w+)\s*=\s*.+$", re.MULTILINE)

# Unindented only; indented defs belong to a class body
_FUNCTION_RE = re.compile(r"^def\s+(\w+)\s*\(([^)]{0,1000})\)\s*:", re.MULTILINE)


class PythonParser:
    """Indentation-heuristic Python parser.

    The first base class is reported as ``extends`` and the remaining ones
    as ``implements``.
    """

    language = "python"

    def parse(self, code: str) -> StructuralModel:
        model = StructuralModel()

        for match in _CLASS_RE.finditer(code):
            body = self._class_body(code, match.end())
            parents = split_names(match.group(3))

            model.add_class(
                ClassInfo(
                    name=match.group(1),
                    attributes=[
                        AttributeInfo(name=m.group(1), type="", visibility="public")
                        for m in _ATTRIBUTE_RE.finditer(body)
                    ],
                    methods=[
                        MethodInfo(
                            name=m.group(1),
                            params=collapse_whitespace(m.group(2)),
                            returns="",
                            visibility="public",
                        )
                        for m in _METHOD_RE.finditer(body)
                    ],
                    extends=parents[0] if parents else None,
                    implements=parents[1:],
                )
            )

        for m in _FUNCTION_RE.finditer(code):
            model.functions.append(
                FunctionInfo(name=m.group(1), params=collapse_whitespace(m.group(2)), returns="")
            )

        logger.debug(f"Python: {len(model.classes)} classes, {len(model.functions)} functions")
        return model

    @staticmethod
    def _class_body(code: str, header_end: int) -> str:
        """Text after a class header up to the next line-start class."""
        next_class = _NEXT_CLASS_RE.search(code, header_end)
        return code[header_end:next_class.start() if next_class else len(code)]
