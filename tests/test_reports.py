from __future__ import annotations

import pytest

from aaa_audit.app.errors import InvalidRequestError, ReportNotFoundError
from aaa_audit.core.hashing import canonical_json, sha256_of_json
from aaa_audit.db.mongo import ensure_indexes

REPORT = {
    "auditId": "aud_1",
    "title": "Home page",
    "wcagLevel": "AAA",
    "status": "WARN",
    "compliance": {"compliancePercentage": 88.9, "issues": []},
}


def test_canonical_json_ignores_key_order():
    assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'
    assert sha256_of_json({"a": 1, "b": 2}) == sha256_of_json({"b": 2, "a": 1})


def test_store_is_content_addressed(report_manager, collection):
    first = report_manager.store(REPORT)
    assert first["created"] is True
    assert first["contentHash"] == sha256_of_json(REPORT)
    assert first["reportId"].startswith("rep_")
    assert first["wcagLevel"] == "AAA"
    assert first["status"] == "WARN"
    assert first["compliancePercentage"] == 88.9

    again = report_manager.store(dict(reversed(list(REPORT.items()))))
    assert again["created"] is False
    assert again["reportId"] == first["reportId"]
    assert len(collection.docs) == 1


def test_store_rejects_empty_report(report_manager):
    with pytest.raises(InvalidRequestError):
        report_manager.store({})


def test_get_and_missing(report_manager):
    stored = report_manager.store(REPORT)
    got = report_manager.get(stored["contentHash"])
    assert got["report"] == REPORT
    assert got["title"] == "Home page"

    with pytest.raises(ReportNotFoundError):
        report_manager.get("0" * 64)


def test_list_reports_newest_first_without_body(report_manager):
    report_manager.store({**REPORT, "title": "first"})
    report_manager.store({**REPORT, "title": "second"})
    listed = report_manager.list_reports(limit=500)
    assert {r["title"] for r in listed} == {"first", "second"}
    assert all("report" not in r for r in listed)
    assert listed[0]["createdAt"] >= listed[1]["createdAt"]
    assert len(report_manager.list_reports(limit=1)) == 1


def test_verify_detects_tampering(report_manager):
    content_hash = report_manager.store(REPORT)["contentHash"]
    assert report_manager.verify(content_hash, REPORT)["verified"] is True

    tampered = {**REPORT, "status": "PASS"}
    result = report_manager.verify(content_hash, tampered)
    assert result["verified"] is False
    assert result["computedHash"] == sha256_of_json(tampered)

    with pytest.raises(ReportNotFoundError):
        report_manager.verify("f" * 64, REPORT)


def test_ensure_indexes_creates_unique_hash_index(collection):
    ensure_indexes({"db": None, "reports": collection})
    keys = [k for k, _ in collection.indexes]
    assert [("content_hash", 1)] in keys
    unique = [kw for k, kw in collection.indexes if k == [("content_hash", 1)]]
    assert unique[0].get("unique") is True
