"""
ClassHub Backend - Task Tests
==============================

What we test:
    ✅ Create echoes {id, text, is_done: 0}
    ✅ Listing is per user and newest first
    ✅ Missing, blank or non-numeric userId gives an empty list
    ✅ Toggle flips is_done and flips it back
    ✅ Delete removes the task; unknown ids are a no-op
    ✅ Store failures surface as DatabaseError
"""

import pytest
from sqlalchemy.exc import OperationalError

from classhub.exceptions import DatabaseError
from classhub.routes.tasks import parse_user_id
from classhub.services.task_service import TaskService


async def _create(client, user_id, text):
    response = await client.post("/api/tasks", json={"userId": user_id, "text": text})
    assert response.status_code == 200
    return response.json()


class TestTaskRoutes:

    @pytest.mark.asyncio
    async def test_create_echoes_task(self, test_client):
        body = await _create(test_client, 1, "Read chapter 3")

        assert body["text"] == "Read chapter 3"
        assert body["is_done"] == 0
        assert isinstance(body["id"], int)

    @pytest.mark.asyncio
    async def test_list_newest_first_for_owner_only(self, test_client):
        first = await _create(test_client, 1, "first")
        second = await _create(test_client, 1, "second")
        await _create(test_client, 2, "someone else's")

        response = await test_client.get("/api/tasks", params={"userId": 1})

        assert response.status_code == 200
        tasks = response.json()
        assert [t["id"] for t in tasks] == [second["id"], first["id"]]
        assert all(t["user_id"] == 1 for t in tasks)
        assert all(t["is_done"] == 0 for t in tasks)

    @pytest.mark.asyncio
    async def test_list_without_user_id(self, test_client):
        await _create(test_client, 1, "first")

        response = await test_client.get("/api/tasks")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["", "undefined", "abc"])
    async def test_list_with_unusable_user_id(self, test_client, raw):
        await _create(test_client, 1, "first")

        response = await test_client.get("/api/tasks", params={"userId": raw})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_state(self, test_client):
        task = await _create(test_client, 1, "flip me")

        response = await test_client.put(f"/api/tasks/{task['id']}")
        assert response.json() == {"status": "updated"}
        listed = (await test_client.get("/api/tasks", params={"userId": 1})).json()
        assert listed[0]["is_done"] == 1

        await test_client.put(f"/api/tasks/{task['id']}")
        listed = (await test_client.get("/api/tasks", params={"userId": 1})).json()
        assert listed[0]["is_done"] == 0

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        keep = await _create(test_client, 1, "keep")
        drop = await _create(test_client, 1, "drop")

        response = await test_client.delete(f"/api/tasks/{drop['id']}")

        assert response.json() == {"status": "deleted"}
        listed = (await test_client.get("/api/tasks", params={"userId": 1})).json()
        assert [t["id"] for t in listed] == [keep["id"]]

    @pytest.mark.asyncio
    async def test_unknown_ids_are_noops(self, test_client):
        assert (await test_client.put("/api/tasks/9999")).json() == {"status": "updated"}
        assert (await test_client.delete("/api/tasks/9999")).json() == {"status": "deleted"}


class TestParseUserId:

    @pytest.mark.parametrize(
        "raw, expected",
        [(None, None), ("", None), ("  ", None), ("undefined", None), ("7", 7), (" 12 ", 12)],
    )
    def test_parse(self, raw, expected):
        assert parse_user_id(raw) == expected


class TestTaskServiceFailures:

    def setup_method(self):
        self.service = TaskService()

    @pytest.mark.asyncio
    async def test_list_failure_raises(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(DatabaseError, match="Could not retrieve tasks"):
            await self.service.list_for_user(mock_db_session, 1)

    @pytest.mark.asyncio
    async def test_toggle_failure_rolls_back(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("UPDATE", {}, Exception("down"))

        with pytest.raises(DatabaseError, match="toggle"):
            await self.service.toggle(mock_db_session, 7)
        mock_db_session.rollback.assert_awaited_once()
