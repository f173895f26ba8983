"""
Unit tests for the JSON file repositories (logs and verified users).
"""
import json

import pytest

from nextra.core.exceptions import StorageReadError
from nextra.domain.models import LogEntry, VerifiedUser
from nextra.infrastructure.storage import (
    JsonArrayFile,
    JsonLogRepository,
    JsonVerifiedUserRepository,
)


@pytest.fixture
def logs_file(tmp_path):
    store = JsonArrayFile(tmp_path / "logs.json")
    store.ensure_exists()
    return store


@pytest.fixture
def users_file(tmp_path):
    store = JsonArrayFile(tmp_path / "verified.json")
    store.ensure_exists()
    return store


def _user(name: str, role: str = "staff") -> VerifiedUser:
    return VerifiedUser(name=name, role=role, photo=f"/uploads/1-{name.lower()}.jpg")


class TestJsonLogRepository:
    """Tests for JsonLogRepository"""

    @pytest.mark.asyncio
    async def test_empty_collection(self, logs_file):
        assert await JsonLogRepository(logs_file).list_logs() == []

    @pytest.mark.asyncio
    async def test_append_preserves_insertion_order(self, logs_file):
        repo = JsonLogRepository(logs_file)
        entries = [
            LogEntry(name=f"Visitor {i}", time=f"t{i}", gait="91.00%", auth="80.50%", status="Alert")
            for i in range(5)
        ]
        for entry in entries:
            await repo.append_log(entry)

        assert await repo.list_logs() == entries

    @pytest.mark.asyncio
    async def test_duplicates_are_kept(self, logs_file):
        repo = JsonLogRepository(logs_file)
        entry = LogEntry(name="Known User", time="same")
        await repo.append_log(entry)
        await repo.append_log(entry)
        assert len(await repo.list_logs()) == 2

    @pytest.mark.asyncio
    async def test_reload_from_disk_returns_same_content(self, logs_file, tmp_path):
        await JsonLogRepository(logs_file).append_log(LogEntry(name="A", time="t1", gait="90%"))
        await JsonLogRepository(logs_file).append_log(LogEntry(name="B", time="t2"))

        reloaded = JsonLogRepository(JsonArrayFile(tmp_path / "logs.json"))
        assert await reloaded.list_logs() == [
            LogEntry(name="A", time="t1", gait="90%"),
            LogEntry(name="B", time="t2"),
        ]

    @pytest.mark.asyncio
    async def test_stored_record_shape(self, logs_file, tmp_path):
        await JsonLogRepository(logs_file).append_log(
            LogEntry(name="Known User", time="t", gait="88.10%", auth="72.00%", status="Access Granted")
        )
        stored = json.loads((tmp_path / "logs.json").read_text(encoding="utf-8"))
        assert stored == [{
            "name": "Known User",
            "gait": "88.10%",
            "auth": "72.00%",
            "status": "Access Granted",
            "time": "t",
        }]

    @pytest.mark.asyncio
    async def test_record_without_name_is_a_read_error(self, tmp_path):
        path = tmp_path / "logs.json"
        path.write_text('[{"time": "t"}]', encoding="utf-8")
        with pytest.raises(StorageReadError, match="Invalid log record"):
            await JsonLogRepository(JsonArrayFile(path)).list_logs()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("record", [
        {"name": "Known User", "time": 1700000000000},
        {"name": 42, "time": "t"},
        {"name": "Known User", "time": "t", "gait": 93.12},
    ])
    async def test_record_with_non_string_field_is_a_read_error(self, tmp_path, record):
        path = tmp_path / "logs.json"
        path.write_text(json.dumps([record]), encoding="utf-8")
        with pytest.raises(StorageReadError, match="Invalid log record"):
            await JsonLogRepository(JsonArrayFile(path)).list_logs()


class TestJsonVerifiedUserRepository:
    """Tests for JsonVerifiedUserRepository"""

    @pytest.mark.asyncio
    async def test_add_and_list(self, users_file):
        repo = JsonVerifiedUserRepository(users_file)
        await repo.add_user(_user("Alice"))
        await repo.add_user(_user("Bob"))
        assert [u.name for u in await repo.list_users()] == ["Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_find_is_case_insensitive(self, users_file):
        repo = JsonVerifiedUserRepository(users_file)
        await repo.add_user(_user("ALICE"))
        found = await repo.find_user("Alice")
        assert found is not None
        assert found.name == "ALICE"

    @pytest.mark.asyncio
    async def test_find_returns_first_match(self, users_file):
        repo = JsonVerifiedUserRepository(users_file)
        await repo.add_user(_user("alice", role="admin"))
        await repo.add_user(_user("Alice", role="guest"))
        found = await repo.find_user("ALICE")
        assert found.role == "admin"

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, users_file):
        assert await JsonVerifiedUserRepository(users_file).find_user("Nobody") is None

    @pytest.mark.asyncio
    async def test_remove_drops_every_match(self, users_file):
        repo = JsonVerifiedUserRepository(users_file)
        await repo.add_user(_user("alice"))
        await repo.add_user(_user("Bob"))
        await repo.add_user(_user("ALICE"))

        removed = await repo.remove_user("Alice")

        assert removed == 2
        assert [u.name for u in await repo.list_users()] == ["Bob"]

    @pytest.mark.asyncio
    async def test_remove_missing_is_a_no_op(self, users_file):
        repo = JsonVerifiedUserRepository(users_file)
        await repo.add_user(_user("Bob"))
        before = await repo.list_users()

        removed = await repo.remove_user("Nobody")

        assert removed == 0
        assert await repo.list_users() == before

    @pytest.mark.asyncio
    async def test_reload_from_disk_returns_same_content(self, users_file, tmp_path):
        await JsonVerifiedUserRepository(users_file).add_user(_user("Alice"))
        reloaded = JsonVerifiedUserRepository(JsonArrayFile(tmp_path / "verified.json"))
        assert await reloaded.list_users() == [_user("Alice")]

    @pytest.mark.asyncio
    async def test_record_with_non_string_name_is_a_read_error(self, tmp_path):
        path = tmp_path / "verified.json"
        path.write_text(json.dumps([{"name": 42, "role": "x", "photo": "/uploads/a"}]), encoding="utf-8")
        repo = JsonVerifiedUserRepository(JsonArrayFile(path))

        with pytest.raises(StorageReadError, match="Invalid user record"):
            await repo.list_users()
        with pytest.raises(StorageReadError, match="Invalid user record"):
            await repo.find_user("bob")
        with pytest.raises(StorageReadError, match="Invalid user record"):
            await repo.remove_user("bob")
        assert json.loads(path.read_text(encoding="utf-8")) == [{"name": 42, "role": "x", "photo": "/uploads/a"}]
