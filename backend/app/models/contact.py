"""Contact ORM — the single persisted entity: a person's name and phone number.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - first_name, last_name, phone are non-nullable (emptiness is not checked)
    - created_at is set on insert and never exposed through the API

Design Decisions:
    - snake_case attributes, camelCase only at the API boundary (schemas/contact.py)
    - Hard delete only: no deleted_at / paranoid column
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Contact(Base):
    """Contact row in the `contacts` table."""
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Contact id={self.id} {self.first_name} {self.last_name}>"
