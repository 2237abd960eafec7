"""Deterministic PlantUML generator for class diagrams.

Takes a StructuralModel and produces PlantUML syntax. Purely data-driven.
"""

import logging
import re
from typing import Dict, List

from codesketch.core.structure_parser.models import ClassInfo, StructuralModel

logger = logging.getLogger(__name__)

_SKINPARAM = """
skinparam backgroundColor #FEFEFE
skinparam shadowing false
skinparam defaultFontSize 12
skinparam roundCorner 8
skinparam linetype ortho

skinparam class {
  BackgroundColor #F8F9FA
  BorderColor #495057
  ArrowColor #6C757D
  FontColor #212529
  AttributeFontColor #495057
  HeaderBackgroundColor #E9ECEF
}

skinparam note {
  BackgroundColor #FFF3CD
  BorderColor #FFCA2C
  FontColor #664D03
}
""".strip()

_MAX_ATTRIBUTES = 15
_MAX_METHODS = 20

_VISIBILITY_SYMBOLS = {"private": "-", "protected": "#", "public": "+"}


def _sanitize(name: str) -> str:
    """Sanitize a name for safe use inside PlantUML text.

    Keeps ``$`` so PHP properties stay recognizable.
    """
    cleaned = re.sub(r'[<>{}()\[\]@#%^&*;:\'"/\\|~`!]', "", name)
    cleaned = cleaned.replace("\n", " ").replace("\r", "").strip()
    cleaned = re.sub(r"\s+", " ", cleaned)
    return cleaned or "unnamed"


def _safe_alias(name: str, idx: int) -> str:
    """Create a safe PlantUML alias from a name."""
    safe = re.sub(r"[^a-zA-Z0-9]", "_", name)[:30]
    return f"{safe}_{idx}"


def generate_class_diagram(model: StructuralModel) -> str:
    """Generate a PlantUML class diagram from a structural model.

    Classes with the same name (e.g. from a merged multi-language parse) get
    separate boxes; relationship arrows point at the first class carrying the
    target name and are dropped when the target was not parsed.
    """
    if not model.classes and not model.functions:
        return _empty_diagram("No classes or functions detected")

    lines = ["@startuml", _SKINPARAM, ""]

    if len(model.classes) > 4:
        lines.append("left to right direction")
        lines.append("")

    alias_map: Dict[str, str] = {}
    for idx, cls in enumerate(model.classes):
        alias = _safe_alias(cls.name, idx)
        alias_map.setdefault(cls.name, alias)
        lines.extend(_render_class(cls, alias))
        lines.append("")

    if model.functions:
        lines.append('package "functions" <<Frame>> {')
        lines.append('  class "<<module>>" as module_functions {')
        for func in model.functions[:_MAX_METHODS]:
            lines.append(f"    +{_sanitize(func.name)}({_sanitize(func.params)})")
        if len(model.functions) > _MAX_METHODS:
            lines.append(f"    .. +{len(model.functions) - _MAX_METHODS} more ..")
        lines.append("  }")
        lines.append("}")
        lines.append("")

    skipped = 0
    for rel in model.relationships:
        src_alias = alias_map.get(rel.source)
        tgt_alias = alias_map.get(rel.target)
        if not src_alias or not tgt_alias:
            skipped += 1
            continue
        arrow = "--|>" if rel.type == "extends" else "..|>"
        lines.append(f"{src_alias} {arrow} {tgt_alias}")

    if skipped:
        logger.debug(f"Skipped {skipped} relationships with unparsed targets")

    lines.append("")
    lines.append("@enduml")
    return "\n".join(lines)


def _render_class(cls: ClassInfo, alias: str) -> List[str]:
    """Render a single class with its members."""
    lines = [f'class "{_sanitize(cls.name)}" as {alias} {{']

    for attr in cls.attributes[:_MAX_ATTRIBUTES]:
        vis = _VISIBILITY_SYMBOLS.get(attr.visibility, "+")
        type_str = f" : {_sanitize(attr.type)}" if attr.type else ""
        lines.append(f"  {vis}{_sanitize(attr.name)}{type_str}")

    if len(cls.attributes) > _MAX_ATTRIBUTES:
        lines.append(f"  .. +{len(cls.attributes) - _MAX_ATTRIBUTES} more ..")

    if cls.attributes and cls.methods:
        lines.append("  --")

    for method in cls.methods[:_MAX_METHODS]:
        vis = _VISIBILITY_SYMBOLS.get(method.visibility, "+")
        ret_str = f" : {_sanitize(method.returns)}" if method.returns else ""
        params = _sanitize(method.params) if method.params else ""
        lines.append(f"  {vis}{_sanitize(method.name)}({params}){ret_str}")

    if len(cls.methods) > _MAX_METHODS:
        lines.append(f"  .. +{len(cls.methods) - _MAX_METHODS} more ..")

    lines.append("}")
    return lines


def _empty_diagram(message: str) -> str:
    """Generate a minimal diagram with a note for empty data."""
    return f"""@startuml
{_SKINPARAM}

note "{message}" as N
@enduml"""
