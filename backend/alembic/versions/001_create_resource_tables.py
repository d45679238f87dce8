"""Create resource tables

Revision ID: 001
Revises: None
Create Date: 2024-10-29 00:00:00.000000+00:00

What:  Creates the four resource tables: articles, helprequests,
       ucsbdiningcommonsmenuitems and ucsborganizations.
How:   Column definitions mirror campus_api/models/*.py.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# BIGINT, with the INTEGER rowid alias on SQLite (matches campus_api.database.SurrogateKey)
SURROGATE_KEY = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "articles",
        sa.Column("id", SURROGATE_KEY, autoincrement=True, nullable=False,
                  comment="Surrogate key assigned on insert"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("url", sa.String(2048), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("date_added", sa.DateTime(timezone=False), nullable=False,
                  comment="When the article was added, as supplied by the creator"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "helprequests",
        sa.Column("id", SURROGATE_KEY, autoincrement=True, nullable=False),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("team_id", sa.String(64), nullable=False),
        sa.Column("table_or_breakout_room", sa.String(64), nullable=False),
        sa.Column("request_time", sa.DateTime(timezone=False), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("solved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ucsbdiningcommonsmenuitems",
        sa.Column("id", SURROGATE_KEY, autoincrement=True, nullable=False),
        sa.Column("dining_commons_code", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("station", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Natural key: the organization code is the primary key
    op.create_table(
        "ucsborganizations",
        sa.Column("org_code", sa.String(32), nullable=False,
                  comment="Short organization code supplied by the creator"),
        sa.Column("org_translation_short", sa.String(255), nullable=False),
        sa.Column("org_translation", sa.String(512), nullable=False),
        sa.Column("inactive", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("org_code"),
    )


def downgrade() -> None:
    """WARNING: destructive; all resource data is lost."""
    op.drop_table("ucsborganizations")
    op.drop_table("ucsbdiningcommonsmenuitems")
    op.drop_table("helprequests")
    op.drop_table("articles")
