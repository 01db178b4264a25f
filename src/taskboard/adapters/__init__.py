"""Adapters - I/O implementations of ports."""

from .common import StoreError
from .json_file import JsonFileStore
from .supabase_rest import SupabaseAdapter

__all__ = [
    "StoreError",
    "JsonFileStore",
    "SupabaseAdapter",
]
