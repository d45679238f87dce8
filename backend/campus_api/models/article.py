"""
Campus API Backend: Article SQLAlchemy Model
==============================================

What:  ORM model representing the `articles` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Persisted through a Store by the articles resource controller.
When:  Instantiated on create; loaded and mutated in place on update.

Table Design:
    - id: 64-bit surrogate key assigned by the database on insert, never
      changed afterwards
    - title / url / explanation / email: free-form text supplied by an admin
    - date_added: naive local timestamp supplied on create; the update
      allow-list does not include it, so it is fixed for the record's lifetime
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base, SurrogateKey


class Article(Base):
    """
    A link to an external article, with an explanation of why it is relevant.

    Lifecycle:
        1. Created via POST /api/articles/post (id assigned on save)
        2. Title, url, explanation and email may be replaced via PUT
        3. Never deleted through the API
    """

    __tablename__ = "articles"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        SurrogateKey,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate key assigned on insert",
    )

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # 2048 covers practically every URL browsers will accept
    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    explanation: Mapped[str] = mapped_column(Text, nullable=False)

    # Email of the person who submitted the article
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    # Naive timestamp: stored exactly as submitted (ISO 8601 without offset)
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        comment="When the article was added, as supplied by the creator",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Article(id={self.id}, title='{self.title}')>"
