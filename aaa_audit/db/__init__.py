from __future__ import annotations

"""
Database layer:
- Mongo connection
- Schemas
- Repositories
"""

from aaa_audit.db import mongo, repositories, schemas

__all__ = [
    "mongo",
    "repositories",
    "schemas"
]
