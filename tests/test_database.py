from unittest.mock import AsyncMock, MagicMock

import pytest

from formapi.config import TestConfig as ConfigForTests
from formapi.database import FormDataGateway, build_gateway


@pytest.mark.asyncio
async def test_insert_assigns_id_and_find_by_id_returns_record(gateway, valid_payload):
    record_id = await gateway.insert(valid_payload)
    assert len(record_id) == 24

    record = await gateway.find_by_id(record_id)
    assert record == {**valid_payload, "id": record_id}


@pytest.mark.asyncio
async def test_insert_ignores_supplied_id(gateway, valid_payload):
    record_id = await gateway.insert({**valid_payload, "id": "client-chosen"})
    assert record_id != "client-chosen"
    assert (await gateway.find_by_id(record_id))["id"] == record_id


@pytest.mark.asyncio
async def test_find_all_returns_every_record(gateway, valid_payload):
    first = await gateway.insert(valid_payload)
    second = await gateway.insert({**valid_payload, "name": "Bob"})

    records = await gateway.find_all()
    assert sorted(r["id"] for r in records) == sorted([first, second])


@pytest.mark.asyncio
async def test_find_all_on_empty_collection(gateway):
    assert await gateway.find_all() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("record_id", ["does-not-exist", "", "0" * 24])
async def test_unknown_or_malformed_id_matches_nothing(gateway, valid_payload, record_id):
    await gateway.insert(valid_payload)
    assert await gateway.find_by_id(record_id) is None
    assert await gateway.update(record_id, valid_payload) is False
    assert await gateway.delete(record_id) is False


@pytest.mark.asyncio
async def test_update_counts_matched_not_modified(gateway, valid_payload):
    record_id = await gateway.insert(valid_payload)
    assert await gateway.update(record_id, valid_payload) is True


@pytest.mark.asyncio
async def test_update_replaces_fields_of_target_only(gateway, valid_payload):
    target = await gateway.insert(valid_payload)
    other = await gateway.insert({**valid_payload, "name": "Bob"})

    replacement = {**valid_payload, "name": "Carol", "id": other}
    assert await gateway.update(target, replacement) is True

    assert (await gateway.find_by_id(target))["name"] == "Carol"
    assert (await gateway.find_by_id(target))["id"] == target
    assert (await gateway.find_by_id(other))["name"] == "Bob"


@pytest.mark.asyncio
async def test_delete_removes_record_once(gateway, valid_payload):
    record_id = await gateway.insert(valid_payload)
    assert await gateway.delete(record_id) is True
    assert await gateway.find_by_id(record_id) is None
    assert await gateway.delete(record_id) is False


@pytest.mark.asyncio
async def test_ping_runs_server_command():
    collection = MagicMock()
    collection.database.command = AsyncMock(return_value={"ok": 1.0})
    await FormDataGateway(collection).ping()
    collection.database.command.assert_awaited_once_with("ping")


@pytest.mark.asyncio
async def test_close_only_closes_owned_client():
    client = MagicMock()
    client.close = AsyncMock()
    gateway = FormDataGateway(MagicMock(), client=client)
    await gateway.close()
    await gateway.close()
    client.close.assert_awaited_once()

    # borrowed collections are left alone
    await FormDataGateway(MagicMock()).close()


@pytest.mark.asyncio
async def test_build_gateway_uses_configured_names():
    config = ConfigForTests(MONGODB_DATABASE="submissions", MONGODB_COLLECTION="entries")
    gateway = build_gateway(config)
    try:
        assert gateway.collection.name == "entries"
        assert gateway.collection.database.name == "submissions"
    finally:
        await gateway.close()
