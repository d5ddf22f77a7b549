"""SQLAlchemy models.

All ORM models inherit from Base so that Base.metadata.create_all()
picks them up.
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from zoo.db.session import Base  # noqa: F401  re-exported for convenience


class Animal(Base):
    __tablename__ = "animals"
    __table_args__ = (CheckConstraint("age >= 0", name="age_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    # Lookup key, but duplicates are accepted by the store.
    catalog_number: Mapped[str] = mapped_column(String(12), index=True)
    name: Mapped[str] = mapped_column(String(100))
    breed: Mapped[str] = mapped_column(String(100))
    type: Mapped[str] = mapped_column(String(50), index=True)
    age: Mapped[int]
    gender: Mapped[str] = mapped_column(String(20))
    is_healthy: Mapped[bool]

    def __repr__(self) -> str:
        return f"Animal(catalog_number={self.catalog_number!r}, name={self.name!r})"
