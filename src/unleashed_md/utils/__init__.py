"""Utility modules for unleashed-md.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from unleashed_md.utils.hashing import hash_str
from unleashed_md.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
