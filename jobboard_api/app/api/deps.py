"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from ..services.store import JobBoardStore


def get_store(request: Request) -> JobBoardStore:
    """Return the store instance owned by the running application."""
    return request.app.state.store
