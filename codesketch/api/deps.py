"""FastAPI dependencies for CodeSketch.

Provides shared dependencies via FastAPI's Depends() injection system.
"""

from fastapi import Request

from codesketch.setting import ServerSettings


async def get_server_settings(request: Request) -> ServerSettings:
    """Get ServerSettings from app state."""
    return request.app.state.settings
