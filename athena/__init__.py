"""
Athena - Test Entity Graph.

This package contains the core logic for:
- Discovery: locating and parsing test-definition files on disk.
- Classification: sorting definition files into the six entity kinds.
- Resolution: attaching referenced tests, patterns and runs to their containers.
- Entity Manager: the queryable in-memory graph consumed by test runners.
"""

__version__ = "0.1.0"
