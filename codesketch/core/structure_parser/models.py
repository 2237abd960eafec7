"""Structure parser data models.

Defines the structural model returned for a piece of source code.
These are pure data containers with no parsing logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AttributeInfo:
    """A class attribute / property."""

    name: str  # "count" or "$count" for PHP
    type: str = ""  # Raw captured type text, not normalized
    visibility: str = "public"  # "public" | "private" | "protected"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "visibility": self.visibility}


@dataclass
class MethodInfo:
    """A method declared inside a class body."""

    name: str
    params: str = ""  # Raw, whitespace-collapsed parameter list
    returns: str = ""
    visibility: str = "public"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "params": self.params,
            "returns": self.returns,
            "visibility": self.visibility,
        }


@dataclass
class FunctionInfo:
    """A top-level (free) function."""

    name: str
    params: str = ""
    returns: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "params": self.params, "returns": self.returns}


@dataclass
class RelationshipInfo:
    """An extends/implements edge from a parsed class to a named parent.

    The target is free text and need not be one of the parsed classes.
    """

    source: str  # Declaring class name
    target: str  # Parent class / interface name
    type: str  # "extends" | "implements"

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "type": self.type}


@dataclass
class ClassInfo:
    """A class with its members and parents."""

    name: str
    attributes: List[AttributeInfo] = field(default_factory=list)
    methods: List[MethodInfo] = field(default_factory=list)
    extends: Optional[str] = None
    implements: List[str] = field(default_factory=list)

    def relationships(self) -> List[RelationshipInfo]:
        """Relationship edges for this class: extends first, then implements."""
        edges: List[RelationshipInfo] = []
        if self.extends:
            edges.append(RelationshipInfo(source=self.name, target=self.extends, type="extends"))
        for iface in self.implements:
            edges.append(RelationshipInfo(source=self.name, target=iface, type="implements"))
        return edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attributes": [a.to_dict() for a in self.attributes],
            "methods": [m.to_dict() for m in self.methods],
            "extends": self.extends,
            "implements": list(self.implements),
        }


@dataclass
class StructuralModel:
    """Complete structural output for one piece of source code.

    All sequences keep first-appearance order from the source text.
    """

    classes: List[ClassInfo] = field(default_factory=list)
    functions: List[FunctionInfo] = field(default_factory=list)
    relationships: List[RelationshipInfo] = field(default_factory=list)

    def add_class(self, cls: ClassInfo) -> None:
        """Append a class and the relationship edges it declares."""
        self.classes.append(cls)
        self.relationships.extend(cls.relationships())

    def is_empty(self) -> bool:
        return not self.classes and not self.functions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classes": [c.to_dict() for c in self.classes],
            "functions": [f.to_dict() for f in self.functions],
            "relationships": [r.to_dict() for r in self.relationships],
        }


@dataclass
class AnalysisResult:
    """Structural model plus the language label reported to the caller."""

    model: StructuralModel
    language: Optional[str] = None  # None when no language could be resolved
