from __future__ import annotations

"""
LangGraph audit workflow topology + routers.
"""

from aaa_audit.graph import build_graph, routers

__all__ = [
    "build_graph",
    "routers",
]
