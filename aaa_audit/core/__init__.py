from __future__ import annotations

"""
This module provides core functionality for the application.

It includes utilities for clock operations, hashing, ID generation, and general utilities.
"""

from aaa_audit.core import clock, hashing, ids, policies, utils

__all__ = [
    "clock",
    "hashing",
    "ids",
    "policies",
    "utils"
]
