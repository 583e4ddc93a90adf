"""Utilities for ensuring hex string primary keys are populated."""
from __future__ import annotations

from typing import Type
from uuid import uuid4

from sqlalchemy import event
from sqlalchemy.orm import Mapper


def generate_hex_id() -> str:
    """Return a new opaque 32 character lowercase hex identifier."""
    return uuid4().hex


def register_hex_pk_listener(model: Type[object], pk_name: str = "id") -> None:
    """Ensure ``model`` receives a random hex primary key before insert.

    Boards, columns and cards are identified by opaque 32 character hex
    strings rather than database sequences, so nothing on the database side
    fills ``id`` in. The ``before_insert`` listener only assigns a value when
    the caller has not already provided one, which keeps explicit IDs (tests,
    fixtures) working.
    """

    table = getattr(model, "__table__", None)
    if table is None or pk_name not in table.c:
        raise ValueError(f"Model {model!r} does not expose a '{pk_name}' column")

    @event.listens_for(model, "before_insert", propagate=True)
    def _assign_hex_pk(_: Mapper, connection, target) -> None:  # pragma: no cover - SQLAlchemy callback
        if getattr(target, pk_name) is not None:
            return
        setattr(target, pk_name, generate_hex_id())
