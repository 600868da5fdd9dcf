"""
Environment configuration: Cosmos client construction, the shared store
and the display time zone of the HTML pages.
"""
from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

import pytest

from routers.log import deps, html_console_endpoint as console
from routers.log import store as store_mod
from routers.log.store import EntryStore


class _FakeCosmosClient:
    calls: list = []

    def __init__(self, endpoint, credential):
        self.endpoint = endpoint
        self.credential = credential
        _FakeCosmosClient.calls.append(self)

    def get_database_client(self, name):
        client = self

        class _Database:
            def get_container_client(self, container):
                return {"client": client, "database": name, "container": container}

        return _Database()


class _FakeCredential:
    pass


@pytest.fixture
def cosmos(monkeypatch):
    _FakeCosmosClient.calls = []
    monkeypatch.setattr(store_mod, "CosmosClient", _FakeCosmosClient)
    monkeypatch.setattr(store_mod, "DefaultAzureCredential", _FakeCredential)
    monkeypatch.setenv("COSMOS_ENDPOINT", "https://cosmos.test:443/")
    for var in ("COSMOS_KEY", "COSMOS_DATABASE", "COSMOS_CONTAINER"):
        monkeypatch.delenv(var, raising=False)
    return _FakeCosmosClient


def test_from_env_uses_key_when_set(cosmos, monkeypatch):
    monkeypatch.setenv("COSMOS_KEY", "secret")

    store = EntryStore.from_env()

    client = cosmos.calls[-1]
    assert client.endpoint == "https://cosmos.test:443/"
    assert client.credential == "secret"
    assert store._container["client"] is client


def test_from_env_falls_back_to_default_credential(cosmos):
    EntryStore.from_env()
    assert isinstance(cosmos.calls[-1].credential, _FakeCredential)


def test_from_env_default_database_and_container(cosmos):
    store = EntryStore.from_env()
    assert store._container["database"] == "logdb"
    assert store._container["container"] == "log"


def test_from_env_database_and_container_overrides(cosmos, monkeypatch):
    monkeypatch.setenv("COSMOS_DATABASE", "otherdb")
    monkeypatch.setenv("COSMOS_CONTAINER", "entries")

    store = EntryStore.from_env()
    assert store._container["database"] == "otherdb"
    assert store._container["container"] == "entries"


def test_get_store_builds_one_store_per_process(monkeypatch):
    built = []

    def fake_from_env():
        built.append(object())
        return built[-1]

    monkeypatch.setattr(deps, "_store", None)
    monkeypatch.setattr(deps.EntryStore, "from_env", staticmethod(fake_from_env))

    first = deps.get_store()
    assert deps.get_store() is first
    assert deps.try_get_store() is first
    assert len(built) == 1


def test_display_tz_from_env(monkeypatch):
    monkeypatch.setenv("LOG_DISPLAY_TZ", "Asia/Hong_Kong")
    assert console._load_display_tz() == ZoneInfo("Asia/Hong_Kong")


def test_unknown_display_tz_falls_back_to_utc(monkeypatch, caplog):
    monkeypatch.setenv("LOG_DISPLAY_TZ", "Mars/Olympus_Mons")
    with caplog.at_level(logging.WARNING):
        assert console._load_display_tz() == ZoneInfo("UTC")
    assert "Mars/Olympus_Mons" in caplog.text


@pytest.mark.anyio
async def test_subject_page_renders_in_display_tz(client, container, monkeypatch):
    monkeypatch.setenv("LOG_DISPLAY_TZ", "Asia/Hong_Kong")
    monkeypatch.setattr(console, "_display_tz", console._load_display_tz())

    await client.post("/upload/alpha/build", data={"body": "x"})
    container.docs[0]["timestamp"] = 0

    r = await client.get("/log/alpha/build/")
    assert "1970-01-01 08:00:00+08:00" in r.text
    assert "Asia/Hong_Kong" in r.text
