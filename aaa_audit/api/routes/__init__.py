from __future__ import annotations

"""
HTTP routers, one per concern. `create_app` includes every router in ROUTERS.
"""

from aaa_audit.api.routes import alt_text, aria, audit, contrast, media, reports, text, upload

ROUTERS = [
    contrast.router,
    alt_text.router,
    aria.router,
    text.router,
    media.router,
    audit.router,
    reports.router,
    upload.router,
]

__all__ = ["ROUTERS"]
