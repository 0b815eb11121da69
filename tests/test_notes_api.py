"""
Notes API — HTTP Endpoint Tests
=================================

What:  Exercises every /api/notes route through the full ASGI stack.
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.
"""

import pytest


NOTE_FIELDS = {"id", "title", "content", "createdAt", "updatedAt"}


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        response = await test_client.get("/api/notes")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_in_creation_order(self, test_client, create_note):
        await create_note("first", "1")
        await create_note("second", "2")
        await create_note("third", "3")

        response = await test_client.get("/api/notes")

        assert [n["title"] for n in response.json()] == ["first", "second", "third"]


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_note(self, test_client):
        response = await test_client.post(
            "/api/notes", json={"title": "A", "content": "B"}
        )

        assert response.status_code == 201
        note = response.json()
        assert set(note) == NOTE_FIELDS
        assert note["id"] == "1"
        assert note["title"] == "A"
        assert note["content"] == "B"
        assert note["createdAt"] == note["updatedAt"]

    @pytest.mark.asyncio
    async def test_ids_increase(self, create_note):
        ids = [int((await create_note(f"t{i}", "c"))["id"]) for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"title": "A"},
            {"content": "B"},
            {"title": "", "content": "B"},
            {"title": "A", "content": None},
        ],
    )
    async def test_missing_fields(self, test_client, store, payload):
        response = await test_client.post("/api/notes", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"] == "Title and content are required"
        assert store.list() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["", "{title: A}", "[1, 2", "null"])
    async def test_malformed_body(self, test_client, store, raw):
        response = await test_client.post(
            "/api/notes",
            content=raw,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "malformed_request"
        assert response.json()["message"] == "Invalid request body"
        assert store.list() == []

    @pytest.mark.asyncio
    async def test_deeply_nested_body(self, test_client, store):
        response = await test_client.post(
            "/api/notes",
            content="[" * 100_000 + "]" * 100_000,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"
        assert store.list() == []

    @pytest.mark.asyncio
    async def test_content_type_not_required(self, test_client):
        response = await test_client.post(
            "/api/notes",
            content='{"title": "A", "content": "B"}',
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 201


class TestGetNote:

    @pytest.mark.asyncio
    async def test_get_existing(self, test_client, create_note):
        created = await create_note()

        response = await test_client.get(f"/api/notes/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_never_issued(self, test_client):
        response = await test_client.get("/api/notes/999")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert response.json()["message"] == "Note not found"

    @pytest.mark.asyncio
    async def test_get_non_numeric_id(self, test_client):
        response = await test_client.get("/api/notes/abc")
        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, test_client, create_note):
        created = await create_note("A", "B")

        response = await test_client.put(
            f"/api/notes/{created['id']}", json={"title": "E", "content": "F"}
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["id"] == created["id"]
        assert updated["title"] == "E"
        assert updated["content"] == "F"
        assert updated["createdAt"] == created["createdAt"]
        assert updated["updatedAt"] >= created["updatedAt"]

    @pytest.mark.asyncio
    async def test_update_keeps_position(self, test_client, create_note):
        await create_note("A", "B")
        await create_note("C", "D")

        await test_client.put("/api/notes/1", json={"title": "E", "content": "F"})
        listing = (await test_client.get("/api/notes")).json()

        assert [n["id"] for n in listing] == ["1", "2"]
        assert listing[0]["title"] == "E"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client):
        response = await test_client.put(
            "/api/notes/5", json={"title": "E", "content": "F"}
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"

    @pytest.mark.asyncio
    async def test_update_unknown_id_with_bad_body_is_404(self, test_client):
        response = await test_client.put(
            "/api/notes/5",
            content="garbage",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_missing_fields(self, test_client, create_note):
        created = await create_note("A", "B")

        response = await test_client.put(
            f"/api/notes/{created['id']}", json={"title": "E"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title and content are required"
        current = (await test_client.get(f"/api/notes/{created['id']}")).json()
        assert current == created

    @pytest.mark.asyncio
    async def test_update_malformed_body(self, test_client, create_note):
        created = await create_note("A", "B")

        response = await test_client.put(
            f"/api/notes/{created['id']}",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"
        current = (await test_client.get(f"/api/notes/{created['id']}")).json()
        assert current == created


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_delete_returns_204_empty(self, test_client, create_note):
        created = await create_note()

        response = await test_client.delete(f"/api/notes/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_deleted_note_is_gone(self, test_client, create_note):
        created = await create_note()
        await test_client.delete(f"/api/notes/{created['id']}")

        assert (await test_client.get(f"/api/notes/{created['id']}")).status_code == 404
        assert (await test_client.get("/api/notes")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client):
        response = await test_client.delete("/api/notes/1")
        assert response.status_code == 404
        assert response.json()["message"] == "Note not found"

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client, create_note):
        created = await create_note()
        await test_client.delete(f"/api/notes/{created['id']}")
        response = await test_client.delete(f"/api/notes/{created['id']}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_full_scenario(test_client):
    """Create two, list, update the first, delete the second."""
    r = await test_client.post("/api/notes", json={"title": "A", "content": "B"})
    assert r.status_code == 201
    assert r.json()["id"] == "1"

    r = await test_client.post("/api/notes", json={"title": "C", "content": "D"})
    assert r.status_code == 201
    assert r.json()["id"] == "2"

    r = await test_client.get("/api/notes")
    assert [n["id"] for n in r.json()] == ["1", "2"]

    r = await test_client.put("/api/notes/1", json={"title": "E", "content": "F"})
    assert r.status_code == 200
    assert r.json()["id"] == "1"
    assert r.json()["title"] == "E"
    r = await test_client.get("/api/notes")
    assert [n["id"] for n in r.json()] == ["1", "2"]
    assert r.json()[0]["title"] == "E"

    r = await test_client.delete("/api/notes/2")
    assert r.status_code == 204

    r = await test_client.get("/api/notes/2")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_ids_never_reused_over_http(test_client, create_note):
    await create_note()
    second = await create_note()
    await test_client.delete(f"/api/notes/{second['id']}")

    third = await create_note()

    assert third["id"] == "3"
