"""Read-only projection of a board with its columns and cards."""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from taskboard.errors import NotFoundError
from taskboard.models import Board, BoardColumn
from taskboard.schemas import BoardResponse, CardResponse, ColumnResponse
from taskboard.services.ordering import display_sort_key


def _serialize_column(column: BoardColumn) -> ColumnResponse:
    cards = [CardResponse.model_validate(card) for card in sorted(column.cards, key=display_sort_key)]
    return ColumnResponse(
        id=column.id,
        board_id=column.board_id,
        name=column.name,
        order=column.order,
        created_at=column.created_at,
        updated_at=column.updated_at,
        cards=cards,
    )


def serialize_board(board: Board) -> BoardResponse:
    return BoardResponse(
        id=board.id,
        name=board.name,
        created_at=board.created_at,
        updated_at=board.updated_at,
        columns=[_serialize_column(column) for column in sorted(board.columns, key=display_sort_key)],
    )


def load_board(db: Session, board_id: str) -> BoardResponse:
    """Load ``board_id`` with columns and cards, each sorted ascending by order."""
    board = (
        db.query(Board)
        .options(selectinload(Board.columns).selectinload(BoardColumn.cards))
        .filter(Board.id == board_id)
        .first()
    )
    if board is None:
        raise NotFoundError("Board not found")
    return serialize_board(board)
