"""Schemas for boards and board authentication"""
from datetime import datetime
from typing import List

from pydantic import BaseModel

from taskboard.schemas.column import ColumnResponse


class BoardCreate(BaseModel):
    name: str
    password: str


class BoardLogin(BaseModel):
    password: str


class BoardResponse(BaseModel):
    """Full board projection. The password hash is never part of it."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    columns: List[ColumnResponse] = []

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    message: str
    board_id: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
