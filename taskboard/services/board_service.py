"""Board use cases: creation, login, and column/card mutations.

Every method receives the board ID it acts on as an explicit argument. For
everything except :meth:`BoardService.create_board` and
:meth:`BoardService.login` that ID must come from a verified credential.
Rows are always looked up by ``(id, board_id)``, so an entity that exists on
another board is reported exactly like one that does not exist.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from taskboard.database import atomic
from taskboard.errors import AuthError, NotFoundError, TaskBoardError, ValidationError
from taskboard.models import Board, BoardColumn, Card, DEFAULT_COLUMN_NAMES
from taskboard.schemas import BoardResponse, CardCreate, CardMove, CardUpdate
from taskboard.services.aggregate import load_board
from taskboard.services.identity import BCRYPT_MAX_PASSWORD_BYTES, Credential, IdentityBroker
from taskboard.services.ordering import is_noop_move, next_order

logger = logging.getLogger(__name__)

BOARD_NAME_MAX_LENGTH = 255
COLUMN_NAME_MAX_LENGTH = 100
CARD_TITLE_MAX_LENGTH = 500
ASSIGNEE_MAX_LENGTH = 255


def _require_text(value: Optional[str], label: str, max_length: Optional[int] = None) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{label} must be at most {max_length} characters")
    return value


def _limit_text(value: Optional[str], label: str, max_length: int) -> str:
    value = value or ""
    if len(value) > max_length:
        raise ValidationError(f"{label} must be at most {max_length} characters")
    return value


class BoardService:
    """Orchestrates identity, ordering and persistence for one request."""

    def __init__(self, db: Session, identity: IdentityBroker, password_min_length: int = 6) -> None:
        self.db = db
        self.identity = identity
        self.password_min_length = password_min_length

    # ========== Lookups ==========

    def _ensure_board(self, board_id: str) -> None:
        exists = self.db.query(Board.id).filter(Board.id == board_id).first()
        if exists is None:
            raise NotFoundError("Board not found")

    def _get_column(self, board_id: str, column_id: str) -> BoardColumn:
        column = (
            self.db.query(BoardColumn)
            .filter(BoardColumn.id == column_id, BoardColumn.board_id == board_id)
            .first()
        )
        if column is None:
            raise NotFoundError("Column not found")
        return column

    def _get_card(self, board_id: str, card_id: str) -> Card:
        card = self.db.query(Card).filter(Card.id == card_id, Card.board_id == board_id).first()
        if card is None:
            raise NotFoundError("Card not found")
        return card

    def _column_orders(self, board_id: str):
        rows = self.db.query(BoardColumn.order).filter(BoardColumn.board_id == board_id).all()
        return [order for (order,) in rows]

    def _card_orders(self, board_id: str, column_id: str):
        rows = (
            self.db.query(Card.order)
            .filter(Card.board_id == board_id, Card.column_id == column_id)
            .all()
        )
        return [order for (order,) in rows]

    def _check_password_policy(self, password: Optional[str]) -> str:
        if not password:
            raise ValidationError("Password is required")
        if len(password) < self.password_min_length:
            raise ValidationError(f"Password must be at least {self.password_min_length} characters")
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return password

    # ========== Boards ==========

    def create_board(self, name: str, password: str) -> Tuple[BoardResponse, Credential]:
        """Create a board with the three default columns and log straight into it."""
        _require_text(name, "Board name", BOARD_NAME_MAX_LENGTH)
        self._check_password_policy(password)

        try:
            password_hash = self.identity.hash_password(password)
        except ValueError as exc:
            logger.exception("Password hashing failed")
            raise TaskBoardError("Failed to create board") from exc

        board = Board(name=name, password_hash=password_hash)
        board.columns = [
            BoardColumn(name=column_name, order=position)
            for position, column_name in enumerate(DEFAULT_COLUMN_NAMES, start=1)
        ]
        with atomic(self.db):
            self.db.add(board)

        board_id = board.id
        logger.info("Created board %s", board_id)
        return load_board(self.db, board_id), self.identity.issue_credential(board_id)

    def login(self, board_id: str, password: str) -> Credential:
        board = self.db.query(Board).filter(Board.id == board_id).first()
        if board is None or not self.identity.verify_password(board.password_hash, password or ""):
            logger.warning("Rejected login for board %s", board_id)
            raise AuthError("Invalid password")
        return self.identity.issue_credential(board.id)

    def get_board(self, board_id: str) -> BoardResponse:
        return load_board(self.db, board_id)

    # ========== Columns ==========

    def create_column(self, board_id: str, name: str) -> BoardColumn:
        _require_text(name, "Column name", COLUMN_NAME_MAX_LENGTH)

        with atomic(self.db):
            self._ensure_board(board_id)
            column = BoardColumn(
                board_id=board_id,
                name=name,
                order=next_order(self._column_orders(board_id)),
            )
            self.db.add(column)

        self.db.refresh(column)
        return column

    def update_column(self, board_id: str, column_id: str, name: str) -> BoardColumn:
        _require_text(name, "Column name", COLUMN_NAME_MAX_LENGTH)

        with atomic(self.db):
            column = self._get_column(board_id, column_id)
            column.name = name

        self.db.refresh(column)
        return column

    def delete_column(self, board_id: str, column_id: str) -> None:
        """Delete a column and its cards; children go first in the same transaction."""
        with atomic(self.db):
            removed_cards = (
                self.db.query(Card)
                .filter(Card.board_id == board_id, Card.column_id == column_id)
                .delete(synchronize_session="fetch")
            )
            deleted = (
                self.db.query(BoardColumn)
                .filter(BoardColumn.id == column_id, BoardColumn.board_id == board_id)
                .delete(synchronize_session="fetch")
            )
            if not deleted:
                raise NotFoundError("Column not found")

        logger.info("Deleted column %s with %d cards from board %s", column_id, removed_cards, board_id)

    # ========== Cards ==========

    def create_card(self, board_id: str, card_in: CardCreate) -> Card:
        if not card_in.title or not card_in.column_id:
            raise ValidationError("Title and column ID are required")
        _require_text(card_in.title, "Title", CARD_TITLE_MAX_LENGTH)
        assignee = _limit_text(card_in.assignee, "Assignee", ASSIGNEE_MAX_LENGTH)

        with atomic(self.db):
            self._ensure_board(board_id)
            self._get_column(board_id, card_in.column_id)
            card = Card(
                board_id=board_id,
                column_id=card_in.column_id,
                title=card_in.title,
                description=card_in.description or "",
                assignee=assignee,
                deadline=card_in.deadline,
                order=next_order(self._card_orders(board_id, card_in.column_id)),
            )
            self.db.add(card)

        self.db.refresh(card)
        return card

    def update_card(self, board_id: str, card_id: str, card_update: CardUpdate) -> Card:
        """Apply the supplied fields only.

        Empty strings count as "not supplied", so a field can be changed but
        never cleared through this call.
        """
        update_data = {
            field: value
            for field, value in card_update.model_dump(exclude_none=True).items()
            if value != ""
        }
        if "title" in update_data:
            _require_text(update_data["title"], "Title", CARD_TITLE_MAX_LENGTH)
        if "assignee" in update_data:
            _limit_text(update_data["assignee"], "Assignee", ASSIGNEE_MAX_LENGTH)

        with atomic(self.db):
            card = self._get_card(board_id, card_id)
            for field, value in update_data.items():
                setattr(card, field, value)

        self.db.refresh(card)
        return card

    def move_card(self, board_id: str, card_id: str, move: CardMove) -> Card:
        """Move a card to the end of another column of the same board.

        The read of the card, the order computation and the write share one
        transaction. Moving into the current column writes nothing.
        """
        if not move.column_id:
            raise ValidationError("Column ID is required")

        with atomic(self.db):
            card = self._get_card(board_id, card_id)
            if is_noop_move(card.column_id, move.column_id):
                logger.debug("Card %s already in column %s", card_id, move.column_id)
            else:
                self._get_column(board_id, move.column_id)
                new_order = next_order(self._card_orders(board_id, move.column_id))
                card.column_id = move.column_id
                card.order = new_order

        self.db.refresh(card)
        return card

    def delete_card(self, board_id: str, card_id: str) -> None:
        with atomic(self.db):
            deleted = (
                self.db.query(Card)
                .filter(Card.id == card_id, Card.board_id == board_id)
                .delete(synchronize_session="fetch")
            )
            if not deleted:
                raise NotFoundError("Card not found")

        logger.info("Deleted card %s from board %s", card_id, board_id)
