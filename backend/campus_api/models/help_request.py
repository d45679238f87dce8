"""
Campus API Backend: HelpRequest SQLAlchemy Model
==================================================

What:  ORM model representing the `helprequests` table.
Who:   Persisted through a Store by the help requests resource controller.

A help request is raised by a team during a lab session. Every column except
the surrogate id may be replaced by an update, and it is the one resource
whose records can be deleted.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base, SurrogateKey


class HelpRequest(Base):
    """A request for staff help from a team at a table or breakout room."""

    __tablename__ = "helprequests"

    id: Mapped[int] = mapped_column(SurrogateKey, primary_key=True, autoincrement=True)

    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    team_id: Mapped[str] = mapped_column(String(64), nullable=False)
    table_or_breakout_room: Mapped[str] = mapped_column(String(64), nullable=False)
    request_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)

    # Flipped to True by staff once the team has been helped
    solved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"<HelpRequest(id={self.id}, team_id='{self.team_id}', "
            f"solved={self.solved})>"
        )
