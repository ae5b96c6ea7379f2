from __future__ import annotations
from typing import Any, List


def ensure_list(obj: Any) -> List[Any]:
    """Ensure object is a list. If None, return empty list. If already list, return as-is."""
    if obj is None:
        return []
    if isinstance(obj, list):
        return obj
    return [obj]


def preview(text: str, limit: int = 100) -> str:
    """First `limit` characters of text, with an ellipsis when truncated."""
    text = text or ""
    return text[:limit] + ("..." if len(text) > limit else "")


def dedupe(items: List[Any]) -> List[Any]:
    """Drop repeated items, keeping first occurrence order."""
    seen = set()
    out = []
    for item in items:
        key = id(item) if not isinstance(item, (str, int, float, tuple)) else item
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out
