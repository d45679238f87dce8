"""
Campus API Backend: ORM Models
================================

One declarative class per resource table. Importing this package registers
every table with `Base.metadata` (Alembic relies on that for autogenerate).
"""

from campus_api.models.article import Article
from campus_api.models.help_request import HelpRequest
from campus_api.models.menu_item import MenuItem
from campus_api.models.organization import Organization

__all__ = ["Article", "HelpRequest", "MenuItem", "Organization"]
