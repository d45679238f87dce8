"""
Campus API Backend: Dining Commons Menu Item Endpoint Tests
=============================================================

What:  HTTP-level tests for /api/ucsbdiningcommonsmenuitems.
"""

import pytest
import pytest_asyncio

from campus_api.models import MenuItem
from campus_api.routes.resources import get_menu_item_store
from campus_api.stores import InMemoryStore

BASE = "/api/ucsbdiningcommonsmenuitems"


def _item(id, name="Baked Pesto Pasta with Chicken"):
    return MenuItem(id=id, dining_commons_code="ortega", name=name, station="Entree Specials")


@pytest.fixture
def store():
    return InMemoryStore(MenuItem, records=[_item(1), _item(2, name="Tofu Banh Mi Sandwich (v)")])


@pytest_asyncio.fixture
async def api(app, client, store):
    app.dependency_overrides[get_menu_item_store] = lambda: store
    yield client
    app.dependency_overrides.clear()


class TestMenuItemsEndpoints:

    @pytest.mark.asyncio
    async def test_list(self, api, user_headers):
        response = await api.get(f"{BASE}/all", headers=user_headers)

        assert response.status_code == 200
        assert {item["name"] for item in response.json()} == {
            "Baked Pesto Pasta with Chicken",
            "Tofu Banh Mi Sandwich (v)",
        }

    @pytest.mark.asyncio
    async def test_get(self, api, user_headers):
        response = await api.get(BASE, params={"id": 2}, headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {
            "id": 2,
            "diningCommonsCode": "ortega",
            "name": "Tofu Banh Mi Sandwich (v)",
            "station": "Entree Specials",
        }

    @pytest.mark.asyncio
    async def test_get_missing(self, api, user_headers):
        response = await api.get(BASE, params={"id": 7}, headers=user_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "UCSBDiningCommonsMenuItem with id 7 not found"

    @pytest.mark.asyncio
    async def test_post_assigns_next_id(self, api, store, admin_headers):
        params = {"diningCommonsCode": "portola", "name": "Chicken Caesar Salad", "station": "Greens"}

        response = await api.post(f"{BASE}/post", params=params, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {**params, "id": 3}
        assert len(store) == 3

    @pytest.mark.asyncio
    async def test_admin_only_can_write_but_not_read(self, api, admin_only_headers):
        params = {"diningCommonsCode": "dlg", "name": "Oatmeal", "station": "Breakfast"}

        created = await api.post(f"{BASE}/post", params=params, headers=admin_only_headers)
        listed = await api.get(f"{BASE}/all", headers=admin_only_headers)

        assert created.status_code == 200
        assert listed.status_code == 403

    @pytest.mark.asyncio
    async def test_put(self, api, store, admin_headers):
        edited = {"diningCommonsCode": "carrillo", "name": "Pesto Pasta", "station": "Pasta"}

        response = await api.put(BASE, params={"id": 1}, json=edited, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {**edited, "id": 1}
        assert (await store.find_by_id(1)).dining_commons_code == "carrillo"

    @pytest.mark.asyncio
    async def test_put_missing(self, api, store, admin_headers):
        edited = {"diningCommonsCode": "carrillo", "name": "Pesto Pasta", "station": "Pasta"}

        response = await api.put(BASE, params={"id": 67}, json=edited, headers=admin_headers)

        assert response.status_code == 404
        assert len(store) == 2

    @pytest.mark.asyncio
    async def test_delete_not_exposed(self, api, store, admin_headers):
        response = await api.delete(BASE, params={"id": 1}, headers=admin_headers)

        assert response.status_code == 405
        assert len(store) == 2
