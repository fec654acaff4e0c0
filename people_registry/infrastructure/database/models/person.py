"""SQLAlchemy ORM model for the Person entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from people_registry.infrastructure.database.base import Base


class PersonModel(Base):
    """ORM model mapped to the 'people' table."""

    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted newest row
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<PersonModel(id={self.id}, name='{self.name}')>"
