"""
Endpoints whose records reference another HR table: employment contracts
(candidates) and appraisals (employees).
"""
import pytest

CONTRACTS = "/api/v1/employment-contracts"
APPRAISALS = "/api/v1/appraisals"


@pytest.mark.asyncio
class TestEmploymentContractEndpoints:

    async def test_create_includes_candidate(self, client, candidate):
        resp = await client.post(
            CONTRACTS,
            json={"candidate_id": candidate.id, "contract_type": "Permanent", "contract_start_date": "2024-04-01"},
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "employment contract created successfully"
        data = body["data"]
        assert data["contracted_candidate"] == {"id": candidate.id, "full_name": "Asha Verma"}
        assert data["contract_start_date"].startswith("2024-04-01")
        assert data["contract_end_date"] is not None
        assert data["document_path"] == ""

    async def test_create_with_missing_candidate_is_404(self, client):
        resp = await client.post(CONTRACTS, json={"candidate_id": 999999})

        assert resp.status_code == 404
        assert resp.json()["message"] == "Candidate not found"

        listing = (await client.get(CONTRACTS)).json()["data"]
        assert listing["totalCount"] == 0

    async def test_get_missing_contract(self, client):
        resp = await client.get(f"{CONTRACTS}/31337")

        assert resp.status_code == 404
        assert resp.json()["message"] == "employment contract not found"

    async def test_list_by_candidate(self, client, create_contract, make_candidate):
        other = await make_candidate(full_name="Kiran Rao")
        await create_contract()
        await create_contract(candidate_id=other.id, contract_type="Internship")

        page = (await client.get(CONTRACTS, params={"candidate_id": other.id})).json()["data"]

        assert page["totalCount"] == 1
        assert page["data"][0]["contracted_candidate"]["full_name"] == "Kiran Rao"

    async def test_search_by_candidate_name(self, client, create_contract):
        await create_contract()

        page = (await client.get(CONTRACTS, params={"search": "ASHA"})).json()["data"]

        assert page["totalCount"] == 1

    async def test_update_and_delete(self, client, create_contract):
        contract = await create_contract()

        updated = await client.put(f"{CONTRACTS}/{contract.id}", json={"description": "Renewed for 2025"})
        assert updated.status_code == 200
        assert updated.json()["message"] == "employment contract updated successfully"
        assert updated.json()["data"]["description"] == "Renewed for 2025"

        deleted = await client.delete(f"{CONTRACTS}/{contract.id}")
        assert deleted.json() == {"message": "employment contract deleted successfully", "data": None}


@pytest.mark.asyncio
class TestAppraisalEndpoints:

    async def test_create_defaults_and_employee(self, client, employee):
        resp = await client.post(APPRAISALS, json={"employee_id": str(employee.id), "rating": 4.25})

        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["status"] == "Pending"
        assert data["rating"] == 4.25
        assert data["appraisal_employee"] == {
            "id": employee.id,
            "full_name": "Rahul Menon",
            "employee_code": "EMP-0001",
        }

    async def test_create_with_missing_employee_is_404(self, client):
        resp = await client.post(APPRAISALS, json={"employee_id": 424242})

        assert resp.status_code == 404
        assert resp.json() == {"message": "Employee not found", "data": None, "code": "not_found"}

    async def test_list_filters_by_employee(self, client, create_appraisal, make_employee, employee):
        other = await make_employee()
        await create_appraisal()
        await create_appraisal(employee_id=other.id)

        page = (await client.get(APPRAISALS, params={"employee_id": employee.id, "size": 1})).json()["data"]

        assert page["totalCount"] == 1
        assert page["totalPages"] == 1
        assert page["data"][0]["employee_id"] == employee.id
