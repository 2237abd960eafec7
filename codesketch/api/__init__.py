"""
REST API module for CodeSketch.

Provides FastAPI endpoints for:
- Structural parsing of pasted/uploaded code
- PlantUML class diagram rendering
"""
