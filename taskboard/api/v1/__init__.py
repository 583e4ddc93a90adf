"""Version 1 API routers."""
from fastapi import APIRouter

from taskboard.api.v1 import boards, cards, columns
from taskboard.schemas import ErrorResponse

api_router = APIRouter(
    prefix="/api",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        401: {"model": ErrorResponse, "description": "Missing or invalid credential"},
        404: {"model": ErrorResponse, "description": "Not found on this board"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
api_router.include_router(boards.router, tags=["boards"])
api_router.include_router(columns.router, prefix="/columns", tags=["columns"])
api_router.include_router(cards.router, prefix="/cards", tags=["cards"])

__all__ = ["api_router"]
