"""
Functional Entities.

- FunctionalTestEntity: a single functional test; leaf.
- FunctionalSuiteEntity: declares an ordered list of test names under
  ``tests`` and owns freshly created FunctionalTestEntity children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from athena.entities.base import Entity, EntityKind, get_refs

SUITE_TESTS_FIELD = "tests"
TEST_SUITE_REFS_FIELD = "suiteRefs"


@dataclass(eq=False)
class FunctionalTestEntity(Entity):
    """A functional test."""

    KIND = EntityKind.FUNCTIONAL_TEST

    def get_suite_refs(self) -> List[str]:
        """Names of the suites this test declares itself part of."""
        return get_refs(self.config, TEST_SUITE_REFS_FIELD)

    def has_no_suite_refs(self) -> bool:
        return not self.get_suite_refs()


@dataclass(eq=False)
class FunctionalSuiteEntity(Entity):
    """
    A functional suite.

    Attributes:
        tests: Attached test entities, in resolution order.
    """

    KIND = EntityKind.FUNCTIONAL_SUITE

    tests: List[FunctionalTestEntity] = field(default_factory=list)

    @property
    def children(self) -> List[Entity]:
        return list(self.tests)

    def has_tests_refs(self) -> bool:
        return bool(self.get_tests_refs())

    def get_tests_refs(self) -> List[str]:
        """Declared test names, in declaration order."""
        return get_refs(self.config, SUITE_TESTS_FIELD)

    def add_test(self, test: FunctionalTestEntity) -> None:
        self.tests.append(test)
