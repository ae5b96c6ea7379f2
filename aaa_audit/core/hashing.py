from __future__ import annotations
import hashlib
import json
from typing import Any


def sha256_of_text(text: str) -> str:
    """Return SHA256 hash of text string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def canonical_json(obj: Any) -> str:
    """Key-sorted, whitespace-free JSON so equal documents hash equally."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)


def sha256_of_json(obj: Any) -> str:
    return sha256_of_text(canonical_json(obj))
