"""
Storage package for the AI Band Registry service.

Both collections live in flat JSON files that are read fully and rewritten
wholesale on every change.
"""

from .json_store import CatalogStore, JsonFileStore, SubmissionStore

__all__ = ["CatalogStore", "JsonFileStore", "SubmissionStore"]
