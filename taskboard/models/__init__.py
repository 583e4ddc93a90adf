"""Task Board Database Models"""
from taskboard.models.card import Card
from taskboard.models.column import BoardColumn, DEFAULT_COLUMN_NAMES
from taskboard.models.board import Board
from taskboard.utils.primary_keys import register_hex_pk_listener

__all__ = [
    "Board",
    "BoardColumn",
    "Card",
    "DEFAULT_COLUMN_NAMES",
]


for _model in (
    Board,
    BoardColumn,
    Card,
):
    register_hex_pk_listener(_model)
