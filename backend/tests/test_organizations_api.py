"""
Campus API Backend: Student Organization Endpoint Tests
=========================================================

What:  HTTP-level tests for /api/ucsborganizations, keyed by the natural key
       `orgCode` instead of a surrogate id.
"""

import pytest
import pytest_asyncio

from campus_api.models import Organization
from campus_api.routes.resources import get_organization_store

ZPR = {
    "orgCode": "ZPR",
    "orgTranslationShort": "ZETA PHI RHO",
    "orgTranslation": "ZETA PHI RHO",
    "inactive": False,
}


def _zpr():
    return Organization(
        org_code="ZPR",
        org_translation_short="ZETA PHI RHO",
        org_translation="ZETA PHI RHO",
        inactive=False,
    )


@pytest_asyncio.fixture
async def api(app, client, mock_store):
    app.dependency_overrides[get_organization_store] = lambda: mock_store
    yield client
    app.dependency_overrides.clear()


class TestOrganizationsEndpoints:

    @pytest.mark.asyncio
    async def test_list(self, api, mock_store, user_headers):
        mock_store.find_all.return_value = [_zpr()]

        response = await api.get("/api/ucsborganizations/all", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == [ZPR]

    @pytest.mark.asyncio
    async def test_get_by_org_code(self, api, mock_store, user_headers):
        mock_store.find_by_id.return_value = _zpr()

        response = await api.get("/api/ucsborganizations", params={"orgCode": "ZPR"}, headers=user_headers)

        assert response.status_code == 200
        assert response.json() == ZPR
        mock_store.find_by_id.assert_awaited_once_with("ZPR")

    @pytest.mark.asyncio
    async def test_get_missing(self, api, mock_store, user_headers):
        response = await api.get(
            "/api/ucsborganizations", params={"orgCode": "munger-hall"}, headers=user_headers
        )

        assert response.status_code == 404
        assert response.json() == {
            "type": "EntityNotFoundException",
            "message": "UCSBOrganization with id munger-hall not found",
        }

    @pytest.mark.asyncio
    async def test_get_without_org_code(self, api, mock_store, user_headers):
        response = await api.get("/api/ucsborganizations", headers=user_headers)

        assert response.status_code == 400
        mock_store.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post(self, api, mock_store, admin_headers):
        params = {**ZPR, "inactive": "false"}

        response = await api.post("/api/ucsborganizations/post", params=params, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == ZPR
        assert mock_store.save.await_args.args[0].org_code == "ZPR"

    @pytest.mark.asyncio
    async def test_put_keeps_org_code(self, api, mock_store, admin_headers):
        mock_store.find_by_id.return_value = _zpr()
        edited = {
            "orgCode": "SKY",
            "orgTranslationShort": "SKYDIVING CLUB",
            "orgTranslation": "SKYDIVING CLUB AT UCSB",
            "inactive": True,
        }

        response = await api.put(
            "/api/ucsborganizations", params={"orgCode": "ZPR"}, json=edited, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {**edited, "orgCode": "ZPR"}

    @pytest.mark.asyncio
    async def test_put_missing_names_the_right_type(self, api, mock_store, admin_headers):
        response = await api.put(
            "/api/ucsborganizations", params={"orgCode": "SKY"}, json=ZPR, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "UCSBOrganization with id SKY not found"
        mock_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_cannot_put(self, api, mock_store, user_headers):
        response = await api.put(
            "/api/ucsborganizations", params={"orgCode": "ZPR"}, json=ZPR, headers=user_headers
        )

        assert response.status_code == 403
        mock_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_rejects_oversized_org_code(self, api, mock_store, admin_headers):
        params = {**ZPR, "orgCode": "Z" * 40, "inactive": "false"}

        response = await api.post("/api/ucsborganizations/post", params=params, headers=admin_headers)

        assert response.status_code == 400
        assert ["query", "orgCode"] in [d["loc"] for d in response.json()["details"]]
        mock_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_rejects_oversized_org_code(self, api, mock_store, user_headers):
        response = await api.get(
            "/api/ucsborganizations", params={"orgCode": "Z" * 33}, headers=user_headers
        )

        assert response.status_code == 400
        mock_store.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_put_rejects_oversized_translation(self, api, mock_store, admin_headers):
        edited = {**ZPR, "orgTranslation": "Z" * 513}

        response = await api.put(
            "/api/ucsborganizations", params={"orgCode": "ZPR"}, json=edited, headers=admin_headers
        )

        assert response.status_code == 400
        mock_store.find_by_id.assert_not_awaited()
