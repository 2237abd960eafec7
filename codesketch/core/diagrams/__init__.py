"""UML diagram generation for parsed structural models.

Public API:
  generate_class_diagram — StructuralModel → PlantUML class diagram
"""

from .structural import generate_class_diagram

__all__ = ["generate_class_diagram"]
