"""Order assignment for columns and cards.

Ordering is append-only: a new column goes after every existing column of its
board, a new or moved card goes after every card already in the destination
column. Nothing is ever renumbered and gaps left by deletions stay open.

The ``max + 1`` computation runs inside the caller's transaction but takes no
row lock and asks for no serializable isolation, so two concurrent inserts
into the same column can pick the same value. ``order`` is a display hint,
not a key; readers break ties with :func:`display_sort_key`.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple


def next_order(existing_orders: Iterable[Optional[int]]) -> int:
    """Return the order for an entity appended after ``existing_orders``."""
    orders = [order for order in existing_orders if order is not None]
    if not orders:
        return 1
    return max(orders) + 1


def is_noop_move(current_column_id: str, target_column_id: str) -> bool:
    """A move into the column the card already sits in changes nothing."""
    return current_column_id == target_column_id


def display_sort_key(entity) -> Tuple:
    """Stable read-time ordering: ``order`` first, then creation time, then ID."""
    created_at = entity.created_at
    return (
        entity.order,
        created_at is None,
        created_at.timestamp() if created_at is not None else 0.0,
        entity.id or "",
    )
