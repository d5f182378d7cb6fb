import uuid

import pytest

BASE = "/api/v1/branches"


@pytest.mark.asyncio
class TestBranchEndpoints:

    async def test_health(self, client):
        resp = await client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    async def test_create_returns_201_envelope(self, client, sample_branch_data):
        resp = await client.post(BASE, json={**sample_branch_data, "unknown_key": "dropped"})

        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "branch created successfully"
        assert body["data"]["branch_name"] == "Head Office"
        assert body["data"]["is_active"] == "Y"
        assert body["data"]["createdby"] == 1
        assert body["data"]["log_inst"] == 1
        assert isinstance(body["data"]["id"], int)

    async def test_create_requires_branch_name(self, client):
        resp = await client.post(BASE, json={"branch_code": "X"})

        assert resp.status_code == 422

    async def test_get_by_id(self, client, create_branch):
        branch = await create_branch(branch_name="Chennai")

        resp = await client.get(f"{BASE}/{branch.id}")

        assert resp.status_code == 200
        assert resp.json()["message"] is None
        assert resp.json()["data"]["branch_name"] == "Chennai"

    async def test_get_missing_is_404(self, client):
        resp = await client.get(f"{BASE}/9999")

        assert resp.status_code == 404
        assert resp.json() == {"message": "branch not found", "data": None, "code": "not_found"}

    async def test_update(self, client, create_branch):
        branch = await create_branch(location="Pune")

        resp = await client.put(f"{BASE}/{branch.id}", json={"location": "Nashik", "is_active": False})

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "branch updated successfully"
        assert body["data"]["location"] == "Nashik"
        assert body["data"]["is_active"] == "N"
        assert body["data"]["updatedby"] == 1
        assert body["data"]["updatedate"] is not None

    async def test_update_with_no_known_field_is_422(self, client, create_branch):
        branch = await create_branch()

        resp = await client.put(f"{BASE}/{branch.id}", json={"nickname": "x"})

        assert resp.status_code == 422
        assert resp.json()["code"] == "invalid_field"

    async def test_delete_then_get(self, client, create_branch):
        branch = await create_branch()

        resp = await client.delete(f"{BASE}/{branch.id}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "branch deleted successfully", "data": None}

        assert (await client.get(f"{BASE}/{branch.id}")).status_code == 404

    async def test_delete_missing_is_500(self, client):
        resp = await client.delete(f"{BASE}/9999")

        assert resp.status_code == 500
        assert resp.json()["code"] == "data_error"
        assert resp.json()["message"].startswith("Error deleting branch")

    async def test_request_id_is_echoed(self, client):
        rid = str(uuid.uuid4())

        resp = await client.get("/health", headers={"X-Request-ID": rid})

        assert resp.headers["X-Request-ID"] == rid


@pytest.mark.asyncio
class TestBranchListing:

    async def test_page_result_shape(self, client, multiple_branches):
        resp = await client.get(BASE, params={"page": 1, "size": 2})

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] is None
        page = body["data"]
        assert set(page) == {"data", "currentPage", "size", "totalPages", "totalCount"}
        assert (page["currentPage"], page["size"], page["totalPages"], page["totalCount"]) == (1, 2, 2, 3)
        assert [b["branch_name"] for b in page["data"]] == ["Bengaluru", "Delhi"]

    @pytest.mark.parametrize("params", [
        {},
        {"page": "0", "size": "0"},
        {"page": "-4", "size": "-1"},
        {"page": "abc", "size": "xyz"},
        {"page": "", "size": ""},
    ])
    async def test_invalid_paging_defaults(self, client, multiple_branches, params):
        resp = await client.get(BASE, params=params)

        assert resp.status_code == 200
        page = resp.json()["data"]
        assert (page["currentPage"], page["size"]) == (1, 10)
        assert page["totalCount"] == 3

    async def test_search_without_match(self, client, multiple_branches):
        page = (await client.get(BASE, params={"search": "atlantis"})).json()["data"]

        assert page["data"] == []
        assert page["totalCount"] == 0
        assert page["totalPages"] == 0

    async def test_malformed_dates_are_ignored(self, client, multiple_branches):
        resp = await client.get(BASE, params={"startDate": "31/01/2024", "endDate": "2024-02-30"})

        assert resp.status_code == 200
        assert resp.json()["data"]["totalCount"] == 3

    async def test_is_active_query(self, client, multiple_branches, branch_repository):
        await branch_repository.update(multiple_branches[0].id, {"is_active": "N"})

        page = (await client.get(BASE, params={"is_active": "false"})).json()["data"]

        assert [b["branch_name"] for b in page["data"]] == ["Mumbai"]
