from __future__ import annotations
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from typing import TypedDict

from aaa_audit.app.errors import DatabaseError

class MongoHandles(TypedDict):
    db: Database
    reports: Collection

def connect_mongo(mongo_uri: str, db_name: str, tls: bool = False) -> MongoHandles:
    # Atlas needs tls=True; local servers usually run without it
    kwargs = {"tls": True, "tlsAllowInvalidCertificates": False} if tls else {}
    client = MongoClient(
        mongo_uri,
        serverSelectionTimeoutMS=30000,
        connectTimeoutMS=20000,
        socketTimeoutMS=20000,
        **kwargs,
    )
    db = client[db_name]
    return {
        "db": db,
        "reports": db["accessibility_reports"],
    }

def ensure_indexes(handles: MongoHandles) -> None:
    reports = handles["reports"]
    try:
        reports.create_index([("content_hash", ASCENDING)], unique=True)
        reports.create_index([("created_at", DESCENDING)])
        reports.create_index([("wcag_level", ASCENDING), ("created_at", DESCENDING)])
    except PyMongoError as e:
        raise DatabaseError(f"Failed to create report indexes: {e}") from e
