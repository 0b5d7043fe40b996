from __future__ import annotations

import importlib
import warnings

from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from tracker.main import app, lifespan
from tracker.routers import errors

SITE_SURVEY = {
    "name": "Site Survey",
    "client": "Acme",
    "status": "active",
    "startDate": "2024-01-01",
    "endDate": "2024-06-01",
    "leader": "Austin Chai",
    "participants": ["Austin Chai", "Xi Liu"],
}


async def test_create_then_list_site_survey(client: AsyncClient) -> None:
    created = await client.post("/api/projects", json=SITE_SURVEY)

    assert created.status_code == 201
    project_id = created.json()["id"]
    assert isinstance(project_id, int)

    listed = await client.get("/api/projects")
    assert listed.status_code == 200
    first = listed.json()[0]
    assert first["id"] == project_id
    assert first["name"] == "Site Survey"
    assert first["participants"] == ["Austin Chai", "Xi Liu"]
    assert first["projectNumber"] == ""
    assert first["notes"] == ""
    assert first["salesRep"] == ""
    assert {"createdAt", "updatedAt", "startDate", "endDate"} <= first.keys()


async def test_null_optional_fields_are_defaulted(client: AsyncClient) -> None:
    body = {**SITE_SURVEY, "notes": None, "participants": None, "projectNumber": None}
    assert (await client.post("/api/projects", json=body)).status_code == 201

    [project] = (await client.get("/api/projects")).json()
    assert project["notes"] == ""
    assert project["participants"] == []
    assert project["projectNumber"] == ""


async def test_missing_required_key_is_rejected(client: AsyncClient) -> None:
    body = {k: v for k, v in SITE_SURVEY.items() if k != "leader"}

    response = await client.post("/api/projects", json=body)

    assert response.status_code == 422
    assert (await client.get("/api/projects")).json() == []


async def test_blank_required_field_maps_to_validation_error(client: AsyncClient) -> None:
    response = await client.post("/api/projects", json={**SITE_SURVEY, "client": " "})

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"
    assert "client" in response.json()["detail"]


async def test_put_replaces_the_record(client: AsyncClient) -> None:
    project_id = (await client.post("/api/projects", json={**SITE_SURVEY, "notes": "draft"})).json()["id"]

    response = await client.put(
        f"/api/projects/{project_id}",
        json={**SITE_SURVEY, "status": "done", "participants": ["Tao Shi"]},
    )

    assert response.status_code == 200
    [project] = (await client.get("/api/projects")).json()
    assert project["status"] == "done"
    assert project["participants"] == ["Tao Shi"]
    assert project["notes"] == ""


async def test_put_on_missing_id_still_succeeds(client: AsyncClient) -> None:
    response = await client.put("/api/projects/4242", json=SITE_SURVEY)

    assert response.status_code == 200
    assert (await client.get("/api/projects")).json() == []


async def test_delete_twice_succeeds_both_times(client: AsyncClient) -> None:
    project_id = (await client.post("/api/projects", json=SITE_SURVEY)).json()["id"]

    assert (await client.delete(f"/api/projects/{project_id}")).status_code == 200
    assert (await client.delete(f"/api/projects/{project_id}")).status_code == 200
    assert (await client.get("/api/projects")).json() == []


async def test_team_members_list_and_add(client: AsyncClient) -> None:
    listed = await client.get("/api/team-members")
    assert listed.json() == ["Austin Chai", "Keming Zhu", "Sophia Wu", "Tao Shi", "Xi Liu"]

    added = await client.post("/api/team-members", json={"name": "Mina Park"})
    assert added.status_code == 201
    assert isinstance(added.json()["id"], int)

    assert (await client.get("/api/team-members")).json()[-1] == "Mina Park"


async def test_duplicate_team_member_maps_to_conflict(client: AsyncClient) -> None:
    response = await client.post("/api/team-members", json={"name": "Xi Liu"})

    assert response.status_code == 409
    assert response.json()["error"] == "duplicate_name"
    assert (await client.get("/api/team-members")).json().count("Xi Liu") == 1


async def test_sales_reps_endpoints(client: AsyncClient) -> None:
    assert (await client.get("/api/sales-reps")).json() == []

    assert (await client.post("/api/sales-reps", json={"name": "Dana"})).status_code == 201
    assert (await client.post("/api/sales-reps", json={"name": "Dana"})).status_code == 409
    assert (await client.get("/api/sales-reps")).json() == ["Dana"]


async def test_storage_failure_maps_to_server_error(
    client: AsyncClient, ready_engine: AsyncEngine,
) -> None:
    async with ready_engine.begin() as conn:
        await conn.execute(text("DROP TABLE projects"))

    response = await client.get("/api/projects")

    assert response.status_code == 500
    assert response.json()["error"] == "storage_error"
    assert "projects" in response.json()["detail"]


async def test_lifespan_prepares_schema_before_serving() -> None:
    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as http:
            assert (await http.get("/health")).json() == {"status": "healthy"}
            members = await http.get("/api/team-members")

    assert members.status_code == 200
    assert "Austin Chai" in members.json()


def test_error_mapping_loads_without_deprecation_warnings() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(errors)

    assert [str(w.message) for w in caught if "deprecated" in str(w.message).lower()] == []
    assert errors.error_response(errors.ValidationError(["name"])).status_code == 422
