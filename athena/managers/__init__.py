"""
Managers Module.

Builds the entity graph from the definition files on disk:
- Test file discovery and loading.
- Name-indexed record lookup used for reference resolution.
- The EntityManager pipeline and its query API.
"""

from athena.managers.entity_manager import EntityManager
from athena.managers.record_index import RecordIndex
from athena.managers.test_files import discover_test_files, load_test_files

__all__ = [
    "EntityManager",
    "RecordIndex",
    "discover_test_files",
    "load_test_files",
]
