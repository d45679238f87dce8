"""
Campus API Backend: Resource Definitions
==========================================

What:  Descriptor and controller instance for each resource.

Resource inventory:
    Resource                    Key              Update allow-list                  Delete
    ─────────────────────────── ──────────────── ────────────────────────────────── ──────
    Articles                    id (surrogate)   title, url, explanation, email     no
    HelpRequest                 id (surrogate)   every field except id              yes
    UCSBDiningCommonsMenuItem   id (surrogate)   diningCommonsCode, name, station   no
    UCSBOrganization            orgCode (natural) orgTranslationShort,
                                                 orgTranslation, inactive           no

`dateAdded` is deliberately absent from the Articles allow-list: it records
when the article was first added.
"""

from campus_api.controllers.resource import ResourceController, ResourceDescriptor
from campus_api.models import Article, HelpRequest, MenuItem, Organization
from campus_api.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate
from campus_api.schemas.help_request import (
    HelpRequestCreate,
    HelpRequestResponse,
    HelpRequestUpdate,
)
from campus_api.schemas.menu_item import MenuItemCreate, MenuItemResponse, MenuItemUpdate
from campus_api.schemas.organization import (
    OrgCode,
    OrganizationCreate,
    OrganizationResponse,
    OrganizationUpdate,
)

ARTICLES = ResourceDescriptor(
    type_name="Articles",
    model=Article,
    create_schema=ArticleCreate,
    update_schema=ArticleUpdate,
    response_schema=ArticleResponse,
    updatable_fields=("title", "url", "explanation", "email"),
)

HELP_REQUESTS = ResourceDescriptor(
    type_name="HelpRequest",
    model=HelpRequest,
    create_schema=HelpRequestCreate,
    update_schema=HelpRequestUpdate,
    response_schema=HelpRequestResponse,
    updatable_fields=(
        "requester_email",
        "team_id",
        "table_or_breakout_room",
        "request_time",
        "explanation",
        "solved",
    ),
    deletable=True,
)

MENU_ITEMS = ResourceDescriptor(
    type_name="UCSBDiningCommonsMenuItem",
    model=MenuItem,
    create_schema=MenuItemCreate,
    update_schema=MenuItemUpdate,
    response_schema=MenuItemResponse,
    updatable_fields=("dining_commons_code", "name", "station"),
)

ORGANIZATIONS = ResourceDescriptor(
    type_name="UCSBOrganization",
    model=Organization,
    create_schema=OrganizationCreate,
    update_schema=OrganizationUpdate,
    response_schema=OrganizationResponse,
    updatable_fields=("org_translation_short", "org_translation", "inactive"),
    key_attr="org_code",
    key_type=OrgCode,
    key_param="orgCode",
)

articles_controller = ResourceController(ARTICLES)
help_requests_controller = ResourceController(HELP_REQUESTS)
menu_items_controller = ResourceController(MENU_ITEMS)
organizations_controller = ResourceController(ORGANIZATIONS)
