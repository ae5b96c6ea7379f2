from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from aaa_audit.api.app import create_app
from aaa_audit.api.deps import build_services
from aaa_audit.app.settings import Settings
from aaa_audit.db.repositories import ReportRepo
from aaa_audit.reports.report_manager import ReportManager
from aaa_audit.tools.checks.alt_text import AltTextBanks
from aaa_audit.tools.templates import fixed_selector

MB = 1024 * 1024


class FakeCursor:
    def __init__(self, docs: List[Dict[str, Any]]):
        self.docs = docs

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self.docs = sorted(self.docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, n: int) -> "FakeCursor":
        self.docs = self.docs[:n]
        return self

    def __iter__(self):
        return iter(self.docs)


class FakeCollection:
    """In-memory stand-in for the reports collection (unique content_hash)."""

    def __init__(self):
        self.docs: List[Dict[str, Any]] = []
        self.indexes: List[Any] = []

    def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return "idx"

    def insert_one(self, doc: Dict[str, Any]) -> None:
        if any(d["content_hash"] == doc["content_hash"] for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error", 11000)
        self.docs.append(doc)

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for d in self.docs:
            if all(d.get(k) == v for k, v in query.items()):
                return d
        return None

    def find(self, query: Dict[str, Any], projection: Optional[Dict[str, int]] = None) -> FakeCursor:
        hidden = {k for k, v in (projection or {}).items() if not v}
        out = []
        for d in self.docs:
            if all(d.get(k) == v for k, v in query.items()):
                out.append({k: copy.deepcopy(v) for k, v in d.items() if k not in hidden})
        return FakeCursor(out)


@pytest.fixture
def banks() -> AltTextBanks:
    return AltTextBanks.default(fixed_selector(0))


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def report_manager(collection: FakeCollection) -> ReportManager:
    return ReportManager(ReportRepo(collection))


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(upload_dir=str(tmp_path / "uploads"), max_image_bytes=1 * MB)


@pytest.fixture
def services(settings: Settings, report_manager: ReportManager):
    svc = build_services(settings, fixed_selector(0))
    svc.reports = report_manager
    return svc


@pytest.fixture
def client(services) -> TestClient:
    return TestClient(create_app(services))
