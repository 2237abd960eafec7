"""CodeSketch: source code to UML structure extraction service."""

__version__ = "0.1.0"
