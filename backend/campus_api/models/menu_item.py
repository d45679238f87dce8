"""
Campus API Backend: Dining Commons Menu Item Model
====================================================

What:  ORM model representing the `ucsbdiningcommonsmenuitems` table.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base, SurrogateKey


class MenuItem(Base):
    """One item served at a station of a dining commons."""

    __tablename__ = "ucsbdiningcommonsmenuitems"

    id: Mapped[int] = mapped_column(SurrogateKey, primary_key=True, autoincrement=True)

    # Code of the dining commons, e.g. "carrillo", "ortega"
    dining_commons_code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    station: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, name='{self.name}')>"
