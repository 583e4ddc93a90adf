"""
Board Column Model
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base
from taskboard.models.card import Card

# Columns every new board starts with, in display order.
DEFAULT_COLUMN_NAMES = ("Актуальные задачи", "В работе", "Выполнено")


class BoardColumn(Base):
    __tablename__ = "columns"

    id = Column(String(32), primary_key=True)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    order = Column("order_num", Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="columns")
    cards = relationship(
        "Card",
        back_populates="column",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[Card.order, Card.created_at, Card.id],
    )
