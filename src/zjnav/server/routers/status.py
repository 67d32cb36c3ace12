"""Router state inspection."""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...router import Router
from . import get_router

router = APIRouter()


@router.get("/")
async def get_state(nav: Router = Depends(get_router)) -> Dict[str, Any]:
    return nav.snapshot()
