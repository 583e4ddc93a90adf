"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.board import (
    BoardCreate,
    BoardLogin,
    BoardResponse,
    ErrorResponse,
    LoginResponse,
    MessageResponse,
)
from taskboard.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from taskboard.schemas.card import CardCreate, CardMove, CardResponse, CardUpdate

__all__ = [
    "BoardCreate",
    "BoardLogin",
    "BoardResponse",
    "ErrorResponse",
    "LoginResponse",
    "MessageResponse",
    "ColumnCreate",
    "ColumnResponse",
    "ColumnUpdate",
    "CardCreate",
    "CardMove",
    "CardResponse",
    "CardUpdate",
]
