"""
Campus API Backend: Resource Routes
=====================================

What:  The four resource routers and the store dependency each one uses.

Each get_*_store is a distinct dependency so tests (or alternative
deployments) can swap the store of one resource:
    app.dependency_overrides[get_article_store] = lambda: InMemoryStore(Article)
"""

from campus_api.controllers.resources import (
    articles_controller,
    help_requests_controller,
    menu_items_controller,
    organizations_controller,
)
from campus_api.models import Article, HelpRequest, MenuItem, Organization
from campus_api.routes.resource_router import build_resource_router
from campus_api.stores import provide_store

get_article_store = provide_store(Article)
get_help_request_store = provide_store(HelpRequest)
get_menu_item_store = provide_store(MenuItem)
get_organization_store = provide_store(Organization)

articles_router = build_resource_router(
    articles_controller, get_article_store, path="articles", tag="Articles"
)
help_requests_router = build_resource_router(
    help_requests_controller, get_help_request_store, path="helprequests", tag="HelpRequests"
)
menu_items_router = build_resource_router(
    menu_items_controller,
    get_menu_item_store,
    path="ucsbdiningcommonsmenuitems",
    tag="UCSBDiningCommonsMenuItems",
)
organizations_router = build_resource_router(
    organizations_controller,
    get_organization_store,
    path="ucsborganizations",
    tag="UCSBOrganizations",
)

resource_routers = [
    articles_router,
    help_requests_router,
    menu_items_router,
    organizations_router,
]
