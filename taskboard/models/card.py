"""
Card Model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base


class Card(Base):
    __tablename__ = "cards"

    id = Column(String(32), primary_key=True)
    # Denormalized from the column for board-scoped filtering
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    column_id = Column(String(32), ForeignKey("columns.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, default="", nullable=False)
    assignee = Column(String(255), default="", nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=True)
    order = Column("order_num", Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    column = relationship("BoardColumn", back_populates="cards")
