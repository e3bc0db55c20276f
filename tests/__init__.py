"""
Athena - Test Suite Package.

Pytest suites for the configuration layer, the entity model and the
EntityManager pipeline. Static definition files live under data/.
"""
