"""HTTP routers for the zjnav daemon."""
from fastapi import Request

from ...router import Router


def get_router(request: Request) -> Router:
    """The single Router owned by the running app."""
    return request.app.state.router
