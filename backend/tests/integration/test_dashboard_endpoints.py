"""API tests for the dashboard endpoints, run in-process against a fresh app."""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from dashboards.infrastructure.logging.log_config import REQUEST_LOGGER_NAME
from dashboards.infrastructure.memory import InMemoryDashboardRepository
from dashboards.main import create_app


def _client(app: FastAPI | None = None) -> AsyncClient:
    transport = ASGITransport(app=app or create_app())
    return AsyncClient(transport=transport, base_url="http://test")


async def _create(client: AsyncClient, name: str, project: str = "proj-1", **extra) -> dict:
    response = await client.post(
        "/dashboard/create", json={"name": name, "project": project, **extra}
    )
    assert response.status_code == 201, response.text
    return response.json()


# ── create / get ──


@pytest.mark.asyncio
async def test_create_returns_201_and_get_returns_same_record():
    async with _client() as client:
        created = await _create(client, "Latency", description="p99 per service")

        assert set(created) == {"id", "name", "description", "project"}
        assert len(created["id"]) == 8 and created["id"].isalnum()

        response = await client.get("/dashboard/get", params={"id": created["id"]})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_without_description_defaults_to_empty():
    async with _client() as client:
        created = await _create(client, "Bare")
    assert created["description"] == ""


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id():
    async with _client() as client:
        created = await _create(client, "Mine", id="chosen!!")
    assert created["id"] != "chosen!!"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"name": "No project"},
        {"name": "Empty project", "project": ""},
        {"name": "", "project": "proj-1"},
        {"project": "proj-1"},
    ],
)
async def test_create_invalid_body_is_400_and_stores_nothing(body):
    repo = InMemoryDashboardRepository()
    async with _client(create_app(repository=repo)) as client:
        response = await client.post("/dashboard/create", json=body)

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert len(repo) == 0


@pytest.mark.asyncio
async def test_create_malformed_json_is_400():
    async with _client() as client:
        response = await client.post(
            "/dashboard/create",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
    assert response.status_code == 400
    assert response.text.startswith("Invalid request payload")


@pytest.mark.asyncio
async def test_get_unknown_or_missing_id_is_404():
    async with _client() as client:
        unknown = await client.get("/dashboard/get", params={"id": "missing1"})
        missing = await client.get("/dashboard/get")

    assert unknown.status_code == 404
    assert unknown.headers["content-type"].startswith("text/plain")
    assert "not found" in unknown.text
    assert missing.status_code == 404


# ── update ──


@pytest.mark.asyncio
async def test_update_description_only_keeps_name():
    async with _client() as client:
        created = await _create(client, "Keep", description="before")
        response = await client.put(
            "/dashboard/update",
            params={"id": created["id"]},
            json={"description": "after"},
        )

    assert response.status_code == 200
    assert response.json() == {**created, "description": "after"}


@pytest.mark.asyncio
async def test_update_never_changes_id_or_project():
    async with _client() as client:
        created = await _create(client, "Old", project="proj-1")
        response = await client.put(
            "/dashboard/update",
            params={"id": created["id"]},
            json={"name": "New", "id": "other123", "project": "proj-2"},
        )
        fetched = await client.get("/dashboard/get", params={"id": created["id"]})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["project"] == "proj-1"
    assert body["name"] == "New"
    assert fetched.json() == body


@pytest.mark.asyncio
async def test_update_unknown_id_is_404_and_changes_nothing():
    async with _client() as client:
        created = await _create(client, "Stable")
        response = await client.put(
            "/dashboard/update", params={"id": "missing1"}, json={"name": "Changed"}
        )
        listing = await client.get("/dashboard/list")

    assert response.status_code == 404
    assert listing.json()["dashboards"] == [created]


@pytest.mark.asyncio
async def test_update_malformed_json_is_400():
    async with _client() as client:
        created = await _create(client, "A")
        response = await client.put(
            "/dashboard/update",
            params={"id": created["id"]},
            content=b"[",
            headers={"content-type": "application/json"},
        )
    assert response.status_code == 400


# ── delete ──


@pytest.mark.asyncio
async def test_delete_then_get_is_404():
    async with _client() as client:
        created = await _create(client, "Temporary")

        deleted = await client.delete("/dashboard/delete", params={"id": created["id"]})
        fetched = await client.get("/dashboard/get", params={"id": created["id"]})
        deleted_again = await client.delete("/dashboard/delete", params={"id": created["id"]})

    assert deleted.status_code == 204
    assert deleted.content == b""
    assert fetched.status_code == 404
    assert deleted_again.status_code == 404


@pytest.mark.asyncio
async def test_delete_preserves_order_of_remaining():
    async with _client() as client:
        records = [await _create(client, name) for name in ["A", "B", "C"]]
        await client.delete("/dashboard/delete", params={"id": records[0]["id"]})
        response = await client.get("/dashboard/list")

    assert [d["name"] for d in response.json()["dashboards"]] == ["B", "C"]
    assert response.json()["next"] == 0


# ── list ──


@pytest.mark.asyncio
async def test_list_paginates_two_at_a_time():
    async with _client() as client:
        for name in ["A", "B", "C"]:
            await _create(client, name)

        first = await client.get("/dashboard/list")
        second = await client.get("/dashboard/list", params={"next": first.json()["next"]})

    assert [d["name"] for d in first.json()["dashboards"]] == ["A", "B"]
    assert first.json()["next"] == 2
    assert [d["name"] for d in second.json()["dashboards"]] == ["C"]
    assert second.json()["next"] == 0


@pytest.mark.asyncio
async def test_list_empty_store():
    async with _client() as client:
        response = await client.get("/dashboard/list", params={"next": ""})

    assert response.status_code == 200
    assert response.json() == {"dashboards": [], "next": 0}


@pytest.mark.asyncio
@pytest.mark.parametrize("cursor", ["abc", "1.5", "-1", "1_0", " 2 ", "٢"])
async def test_list_invalid_cursor_is_400(cursor):
    async with _client() as client:
        response = await client.get("/dashboard/list", params={"next": cursor})

    assert response.status_code == 400
    assert response.text == "Invalid next value"


# ── app wiring ──


@pytest.mark.asyncio
async def test_apps_do_not_share_stores():
    async with _client() as first, _client() as second:
        await _create(first, "Only here")
        listing = await second.get("/dashboard/list")

    assert listing.json()["dashboards"] == []


@pytest.mark.asyncio
async def test_each_request_is_logged_once_with_path_and_params(caplog):
    async with _client() as client:
        with caplog.at_level(logging.INFO, logger=REQUEST_LOGGER_NAME):
            await client.get("/dashboard/get", params={"id": "missing1"})

    records = [r for r in caplog.records if r.name == REQUEST_LOGGER_NAME]
    assert len(records) == 1
    assert records[0].path == "/dashboard/get"
    assert records[0].params == {"id": ["missing1"]}


@pytest.mark.asyncio
async def test_update_with_empty_name_is_400_and_keeps_name():
    async with _client() as client:
        created = await _create(client, "Named")
        response = await client.put(
            "/dashboard/update", params={"id": created["id"]}, json={"name": ""}
        )
        fetched = await client.get("/dashboard/get", params={"id": created["id"]})

    assert response.status_code == 400
    assert fetched.json()["name"] == "Named"
