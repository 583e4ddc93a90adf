"""Core board services: identity, ordering, projection and use cases."""

from .aggregate import load_board, serialize_board
from .board_service import BoardService
from .identity import Credential, IdentityBroker, get_identity_broker
from .ordering import display_sort_key, is_noop_move, next_order

__all__ = [
    "BoardService",
    "Credential",
    "IdentityBroker",
    "display_sort_key",
    "get_identity_broker",
    "is_noop_move",
    "load_board",
    "next_order",
    "serialize_board",
]
