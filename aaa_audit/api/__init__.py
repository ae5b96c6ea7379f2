from __future__ import annotations

"""
FastAPI surface: app factory, per-request service access, request bodies.
"""

from aaa_audit.api.app import create_app
from aaa_audit.api.deps import Services, build_services, get_services

__all__ = [
    "create_app",
    "Services",
    "build_services",
    "get_services",
]
