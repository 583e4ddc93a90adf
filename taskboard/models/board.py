"""
Board Model
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base
from taskboard.models.column import BoardColumn


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    columns = relationship(
        "BoardColumn",
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[BoardColumn.order, BoardColumn.created_at, BoardColumn.id],
    )

    def __repr__(self) -> str:
        return f"<Board id={self.id} name={self.name!r}>"
