from __future__ import annotations

import itertools
import os
import re
import secrets
import time
from typing import List

from sqlalchemy.orm import Mapped, mapped_column, relationship

from extensions import db

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

_object_id_counter = itertools.count(int.from_bytes(os.urandom(2), "big"))
_process_token = secrets.token_bytes(5)


def new_object_id() -> str:
    """Return a 24-char hex id: 4 bytes of epoch seconds, 5 process bytes, 3 counter bytes.

    Ids generated later sort after earlier ones, so ordering by id follows
    insertion order the way document-store object ids do.
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_object_id_counter) % 0x1000000).to_bytes(3, "big")
    return (timestamp + _process_token + counter).hex()


def is_object_id(value: object) -> bool:
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.fullmatch(value))


class User(db.Model):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(db.String(24), primary_key=True, default=new_object_id)
    # Uniqueness is checked by the service, not enforced here.
    username: Mapped[str] = mapped_column(db.String(255), nullable=False, index=True)

    exercises: Mapped[List["Exercise"]] = relationship(
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"<User {self.username} ({self.id})>"


class Exercise(db.Model):
    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(db.String(24), primary_key=True, default=new_object_id)
    user_id: Mapped[str] = mapped_column(
        db.String(24),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(db.Text, nullable=False)
    duration: Mapped[int] = mapped_column(db.Integer, nullable=False)
    # Canonical YYYY-MM-DD so range filters compare lexically.
    date: Mapped[str] = mapped_column(db.String(10), nullable=False, index=True)

    user: Mapped["User"] = relationship(back_populates="exercises")

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"<Exercise {self.description} {self.date} ({self.id})>"
