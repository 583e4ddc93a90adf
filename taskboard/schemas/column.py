"""Schemas for board columns"""
from datetime import datetime
from typing import List

from pydantic import BaseModel

from taskboard.schemas.card import CardResponse


class ColumnCreate(BaseModel):
    name: str


class ColumnUpdate(BaseModel):
    name: str


class ColumnResponse(BaseModel):
    id: str
    board_id: str
    name: str
    order: int
    created_at: datetime
    updated_at: datetime
    cards: List[CardResponse] = []

    class Config:
        from_attributes = True
