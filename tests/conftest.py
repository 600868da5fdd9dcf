"""
Pytest configuration for the log store tests.

Cosmos is replaced by `FakeContainer`, an in-memory stand-in for the
container client that answers the handful of queries `EntryStore` issues.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import httpx
import pytest
from azure.cosmos import exceptions
from httpx import ASGITransport

from routers.log import store as store_mod
from routers.log.deps import get_store, try_get_store
from routers.log.store import EntryStore


class FakeContainer:
    def __init__(self) -> None:
        self.docs: List[Dict[str, Any]] = []
        self.queries: List[Dict[str, Any]] = []
        self.fail: Optional[Exception] = None

    def _check(self) -> None:
        if self.fail is not None:
            raise self.fail

    def create_item(self, body: Dict[str, Any]) -> Dict[str, Any]:
        self._check()
        if any(d["id"] == body["id"] for d in self.docs):
            raise exceptions.CosmosResourceExistsError(status_code=409, message="Conflict")
        doc = copy.deepcopy(body)
        doc["_rid"] = f"rid-{len(self.docs)}"
        self.docs.append(doc)
        return doc

    def read(self) -> Dict[str, Any]:
        self._check()
        return {"id": "log"}

    def query_items(self, query: str, parameters=None, **kwargs):
        self._check()
        params = {p["name"]: p["value"] for p in parameters or []}
        self.queries.append({"query": query, "params": params, **kwargs})

        if query == store_mod.PROJECTS_QUERY:
            return iter(dict.fromkeys(d["project"] for d in self.docs))
        if query == store_mod.SUBJECTS_QUERY:
            return iter(dict.fromkeys(
                d["subject"] for d in self.docs if d["project"] == params["@project"]
            ))
        if query == store_mod.HEADERS_QUERY:
            return iter([
                {"id": d["id"], "timestamp": d["timestamp"]}
                for d in self.docs
                if d["project"] == params["@project"] and d["subject"] == params["@subject"]
            ])
        if query == store_mod.BY_ID_QUERY:
            return iter([copy.deepcopy(d) for d in self.docs if d["id"] == params["@id"]])
        raise AssertionError(f"unexpected query: {query}")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture
def store(container) -> EntryStore:
    return EntryStore(container)


@pytest.fixture
def app(store):
    import main

    main.app.dependency_overrides[get_store] = lambda: store
    main.app.dependency_overrides[try_get_store] = lambda: store
    yield main.app
    main.app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
