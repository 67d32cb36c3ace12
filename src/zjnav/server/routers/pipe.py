"""Trigger endpoint: the HTTP counterpart of `zellij pipe`."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...models import PipeMessage
from ...router import Router
from . import get_router

router = APIRouter()


class PipeResponse(BaseModel):
    """Result of handing a message to the router."""
    status: str = "ok"
    accepted: bool
    pending: int


@router.post("/", response_model=PipeResponse)
async def pipe(message: PipeMessage, nav: Router = Depends(get_router)):
    # Handled on the event loop so the probe task is scheduled on it
    accepted = nav.pipe(message)
    return PipeResponse(accepted=accepted, pending=nav.pending)
