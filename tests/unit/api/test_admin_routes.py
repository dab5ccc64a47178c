from __future__ import annotations

import pytest

EVENT = {
    "event_title": "Final Pitch",
    "event_start": "2099-06-01T13:00:00",
    "event_location": "Auditorium",
    "event_status": "COMING_SOON",
}
LINK = {"title": "Rulebook", "link": "https://example.com/rules", "group_type": "MATERIAL"}


class TestEventRoutes:
    @pytest.mark.asyncio
    async def test_add_list_edit_delete(self, client, memory_cache):
        res = await client.post("/admin/api/event/add-event", json=EVENT)
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Event added successfully"
        event_id = body["data"][0]["id"]

        res = await client.get("/admin/api/event/list-event")
        assert res.status_code == 200
        assert [e["event_title"] for e in res.json()["data"]] == ["Final Pitch"]
        assert await memory_cache.get("event:list") is not None

        res = await client.put(
            "/admin/api/event/edit-event", json={"id": event_id, "event_status": "ONGOING"}
        )
        assert res.status_code == 200
        assert res.json()["message"] == "Event updated successfully"
        assert res.json()["data"][0]["event_status"] == "ONGOING"
        assert await memory_cache.get("event:list") is None

        res = await client.get("/admin/api/event/list-event")
        assert res.json()["data"][0]["event_status"] == "ONGOING"

        res = await client.delete("/admin/api/event/delete-event", params={"id": event_id})
        assert res.status_code == 200
        assert res.json() == {"message": "Event deleted successfully"}

        res = await client.get("/admin/api/event/list-event")
        assert res.json() == {"data": []}

    @pytest.mark.asyncio
    async def test_every_event_view_is_gone_after_add(self, client, memory_cache, fill_views):
        await fill_views(memory_cache)

        res = await client.post("/admin/api/event/add-event", json=EVENT)

        assert res.status_code == 200
        assert set(memory_cache.keys()) == {"link:list", "client:link:list"}

    @pytest.mark.asyncio
    async def test_edit_requires_id(self, client):
        res = await client.put("/admin/api/event/edit-event", json={"event_title": "x"})

        assert res.status_code == 400
        assert res.json() == {"error": "Event ID is required"}

    @pytest.mark.asyncio
    async def test_delete_requires_id(self, client):
        res = await client.delete("/admin/api/event/delete-event")

        assert res.status_code == 400
        assert res.json() == {"error": "Event ID is required"}

    @pytest.mark.asyncio
    async def test_edit_unknown_event(self, client):
        res = await client.put("/admin/api/event/edit-event", json={"id": 41, "event_title": "x"})

        assert res.status_code == 404
        assert res.json() == {"error": "Event 41 not found"}

    @pytest.mark.asyncio
    async def test_rejects_unknown_status(self, client):
        res = await client.post("/admin/api/event/add-event", json={**EVENT, "event_status": "CANCELLED"})

        assert res.status_code == 400
        assert "event_status" in res.json()["error"]

    @pytest.mark.asyncio
    async def test_rejects_unknown_columns(self, client):
        res = await client.post("/admin/api/event/add-event", json={**EVENT, "organizer": "me"})

        assert res.status_code == 400
        assert "organizer" in res.json()["error"]

    @pytest.mark.asyncio
    async def test_store_error_is_a_400(self, client):
        res = await client.post("/admin/api/event/add-event", json=EVENT)
        event_id = res.json()["data"][0]["id"]

        res = await client.put(
            "/admin/api/event/edit-event", json={"id": event_id, "event_location": None}
        )

        assert res.status_code == 400
        assert "NOT NULL" in res.json()["error"]


class TestLinkRoutes:
    @pytest.mark.asyncio
    async def test_add_list_edit_delete(self, client, memory_cache, fill_views):
        res = await client.post("/admin/api/link/add-link", json=LINK)
        assert res.status_code == 200
        assert res.json()["message"] == "Link added successfully"
        link = res.json()["data"][0]
        assert link["is_available"] is True

        res = await client.get("/admin/api/link/list-link")
        assert [row["title"] for row in res.json()["data"]] == ["Rulebook"]

        await fill_views(memory_cache)
        res = await client.put("/admin/api/link/edit-link", json={"id": link["id"], "title": "Rules"})
        assert res.status_code == 200
        assert res.json()["data"][0]["title"] == "Rules"
        assert "link:list" not in memory_cache.keys()
        assert "client:link:list" not in memory_cache.keys()
        assert "event:list" in memory_cache.keys()

        res = await client.delete("/admin/api/link/delete-link", params={"id": link["id"]})
        assert res.json() == {"message": "Link deleted successfully"}

    @pytest.mark.asyncio
    async def test_missing_ids(self, client):
        res = await client.put("/admin/api/link/edit-link", json={"title": "x"})
        assert res.json() == {"error": "Link ID is required"}

        res = await client.delete("/admin/api/link/delete-link")
        assert res.status_code == 400
        assert res.json() == {"error": "Link ID is required"}

    @pytest.mark.asyncio
    async def test_rejects_unknown_group(self, client):
        res = await client.post("/admin/api/link/add-link", json={**LINK, "group_type": "OTHER"})

        assert res.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("entity, label", [("event", "Event"), ("link", "Link")])
async def test_zero_id_counts_as_missing(client, entity, label):
    res = await client.put(f"/admin/api/{entity}/edit-{entity}", json={"id": 0})
    assert res.status_code == 400
    assert res.json() == {"error": f"{label} ID is required"}

    res = await client.delete(f"/admin/api/{entity}/delete-{entity}", params={"id": 0})
    assert res.status_code == 400
    assert res.json() == {"error": f"{label} ID is required"}
