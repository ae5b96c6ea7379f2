from __future__ import annotations

"""
Report layer:
- run the audit graph and build the report
- content-hash, persist and verify reports in Mongo
"""

from aaa_audit.reports import audit_runner, report_builder, report_manager

__all__ = [
    "audit_runner",
    "report_builder",
    "report_manager",
]
