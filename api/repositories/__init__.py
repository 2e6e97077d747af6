"""
Persistence adapters.

Services depend on the JSON file store here rather than opening the data
files themselves.
"""

from .json_storage import JsonStore, MalformedStoreError

__all__ = ["JsonStore", "MalformedStoreError"]
