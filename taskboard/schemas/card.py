"""Schemas for cards"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CardCreate(BaseModel):
    title: str
    description: Optional[str] = None
    assignee: Optional[str] = None
    deadline: Optional[datetime] = None
    column_id: str


class CardUpdate(BaseModel):
    """Partial update. ``None`` and empty strings both leave a field unchanged."""

    title: Optional[str] = None
    description: Optional[str] = None
    assignee: Optional[str] = None
    deadline: Optional[datetime] = None


class CardMove(BaseModel):
    column_id: str
    # Accepted for compatibility; moved cards always go last in the target column.
    order: Optional[int] = None


class CardResponse(BaseModel):
    id: str
    board_id: str
    column_id: str
    title: str
    description: str
    assignee: str
    deadline: Optional[datetime]
    order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
