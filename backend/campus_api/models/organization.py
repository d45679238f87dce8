"""
Campus API Backend: Student Organization Model
================================================

What:  ORM model representing the `ucsborganizations` table.
How:   Keyed by a natural key: the short organization code chosen by the
       caller on create (e.g. "SKY"). There is no surrogate id column, so an
       organization is only ever addressed by its code.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base


class Organization(Base):
    """A registered student organization."""

    __tablename__ = "ucsborganizations"

    # ── Natural Key ───────────────────────────────────────────────────────
    org_code: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        comment="Short organization code supplied by the creator",
    )

    org_translation_short: Mapped[str] = mapped_column(String(255), nullable=False)
    org_translation: Mapped[str] = mapped_column(String(512), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Organization(org_code='{self.org_code}', inactive={self.inactive})>"
