"""
Surf Spots Backend - API Endpoint Tests
=========================================

What:  HTTP behavior of /api/spots and /health end to end.
How:   httpx AsyncClient over ASGITransport; the app writes to a temp spot.json.

What we test:
    ✅ Status codes and bodies for every verb
    ✅ Create → get → delete → get sequence
    ✅ Malformed bodies rejected with 400 before storage is touched
    ✅ Missing or corrupt storage surfaces as 500 with a short message
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from surfspots.main import create_app
from surfspots.services.file_storage import FileStorage
from surfspots.services.memory_storage import MemoryStorage


class TestListAndGet:

    @pytest.mark.asyncio
    async def test_list_spots(self, test_client):
        response = await test_client.get("/api/spots")
        assert response.status_code == 200
        body = response.json()
        assert [r["id"] for r in body] == ["rec5aF9TjMjBicXCK", "recT98Wnf12B2eTbQ"]
        assert body[0]["fields"]["Surf Break"] == ["Reef Break"]
        assert body[0]["createdTime"] == "2018-05-31T00:16:16.000Z"

    @pytest.mark.asyncio
    async def test_list_empty_collection(self, spot_file, test_client):
        spot_file.write_text('{"records": [], "offset": ""}')
        response = await test_client.get("/api/spots")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_null_records(self, spot_file, test_client):
        spot_file.write_text('{"records": null, "offset": null}')
        response = await test_client.get("/api/spots")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_spot(self, test_client):
        response = await test_client.get("/api/spots/recT98Wnf12B2eTbQ")
        assert response.status_code == 200
        assert response.json()["fields"]["Destination"] == "Supertubes"

    @pytest.mark.asyncio
    async def test_get_missing_spot(self, test_client):
        response = await test_client.get("/api/spots/recDoesNotExist")
        assert response.status_code == 404
        assert response.text == "Spot not found"

    @pytest.mark.asyncio
    async def test_responses_carry_request_id(self, test_client):
        response = await test_client.get("/api/spots", headers={"X-Request-ID": "trace-1"})
        assert response.headers["X-Request-ID"] == "trace-1"


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_then_get_then_delete(self, test_client):
        payload = {"id": "42", "fields": {"Address": "Pipeline"}}

        response = await test_client.post("/api/spots", json=payload)
        assert response.status_code == 201
        assert response.content == b""

        response = await test_client.get("/api/spots/42")
        assert response.status_code == 200
        assert response.json()["id"] == "42"
        assert response.json()["fields"]["Address"] == "Pipeline"

        response = await test_client.delete("/api/spots/42")
        assert response.status_code == 200
        assert response.content == b""

        response = await test_client.get("/api/spots/42")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_appends_to_file(self, test_client, spot_file):
        await test_client.post("/api/spots", json={"id": "43", "fields": {"Difficulty Level": 2}})

        stored = json.loads(spot_file.read_text())
        assert stored["records"][-1]["id"] == "43"
        assert stored["records"][-1]["fields"]["Difficulty Level"] == 2
        assert len(stored["records"]) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content_type",
        ["application/x-www-form-urlencoded", "text/plain", None],
    )
    async def test_create_ignores_content_type(self, test_client, content_type):
        headers = {"Content-Type": content_type} if content_type else {}
        response = await test_client.post(
            "/api/spots",
            content=b'{"id": "44", "fields": {"Address": "Teahupoo"}}',
            headers=headers,
        )
        assert response.status_code == 201

        response = await test_client.get("/api/spots/44")
        assert response.status_code == 200
        assert response.json()["fields"]["Address"] == "Teahupoo"

    @pytest.mark.asyncio
    async def test_create_with_null_fields(self, test_client, spot_file):
        response = await test_client.post("/api/spots", json={"id": "7", "fields": None})
        assert response.status_code == 201

        stored = json.loads(spot_file.read_text())["records"][-1]
        assert stored["id"] == "7"
        assert stored["fields"]["Address"] is None

        response = await test_client.get("/api/spots/7")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_create_with_null_id_stores_empty_id(self, test_client, spot_file):
        response = await test_client.post("/api/spots", json={"id": None})
        assert response.status_code == 201
        assert json.loads(spot_file.read_text())["records"][-1]["id"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"{not json",
            b"[1, 2, 3]",
            b'{"id": "1", "fields": {"Difficulty Level": "hard"}}',
        ],
    )
    async def test_create_malformed_body(self, test_client, spot_file, content):
        before = spot_file.read_bytes()
        response = await test_client.post(
            "/api/spots", content=content, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.text == "Invalid request payload"
        assert spot_file.read_bytes() == before


class TestUpdate:

    @pytest.mark.asyncio
    async def test_partial_update(self, test_client):
        response = await test_client.put(
            "/api/spots/rec5aF9TjMjBicXCK",
            json={"Surf Break": ["Reef Break", "Barrel"], "Address": "Banzai Pipeline"},
        )
        assert response.status_code == 200
        assert response.content == b""

        fields = (await test_client.get("/api/spots/rec5aF9TjMjBicXCK")).json()["fields"]
        assert fields["Surf Break"] == ["Reef Break", "Barrel"]
        assert fields["Address"] == "Banzai Pipeline"
        assert fields["Destination"] == "Pipeline"
        assert len(fields["Photos"]) == 1

    @pytest.mark.asyncio
    async def test_update_with_empty_address_keeps_address(self, test_client):
        response = await test_client.put("/api/spots/rec5aF9TjMjBicXCK", json={"Address": ""})
        assert response.status_code == 200
        fields = (await test_client.get("/api/spots/rec5aF9TjMjBicXCK")).json()["fields"]
        assert fields["Address"] == "Pipeline, Oahu, Hawaii"

    @pytest.mark.asyncio
    async def test_update_missing_spot(self, test_client):
        response = await test_client.put("/api/spots/missing", json={"Address": "X"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_with_plain_text_content_type(self, test_client):
        response = await test_client.put(
            "/api/spots/rec5aF9TjMjBicXCK",
            content=b'{"Address": "Ehukai Beach"}',
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 200
        fields = (await test_client.get("/api/spots/rec5aF9TjMjBicXCK")).json()["fields"]
        assert fields["Address"] == "Ehukai Beach"

    @pytest.mark.asyncio
    async def test_update_malformed_body(self, test_client, spot_file):
        before = spot_file.read_bytes()
        response = await test_client.put(
            "/api/spots/rec5aF9TjMjBicXCK", json={"Surf Break": "not a list"}
        )
        assert response.status_code == 400
        assert response.text == "Invalid request payload"
        assert spot_file.read_bytes() == before


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_missing_spot(self, test_client, spot_file):
        before = spot_file.read_bytes()
        response = await test_client.delete("/api/spots/missing")
        assert response.status_code == 404
        assert spot_file.read_bytes() == before


class TestStorageFailures:

    @pytest.mark.asyncio
    async def test_missing_file_is_500(self, tmp_path):
        app = create_app(storage=FileStorage(tmp_path / "spot.json"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/spots")
            assert response.status_code == 500
            assert response.text == "Failed to read JSON file"

            response = await client.post("/api/spots", json={"id": "1"})
            assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_corrupt_document_is_500(self):
        app = create_app(storage=MemoryStorage(b"{oops"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/spots/anything")
            assert response.status_code == 500
            assert response.text == "Failed to parse JSON"


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_ok(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "available"
        assert body["record_count"] == 2

    @pytest.mark.asyncio
    async def test_health_storage_unavailable(self):
        app = create_app(storage=MemoryStorage())
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/health")
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["record_count"] is None
