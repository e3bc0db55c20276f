"""
Entity Classifiers.

Six pure predicates deciding the entity kind of a definition file from the
``type`` discriminator of its parsed contents. Each predicate accepts a
DefinitionFile, an entity, or a bare mapping.

Discriminator values:

    fixture      -> fixture
    test         -> functional test
    suite        -> functional suite
    perfRun      -> performance run
    perfPattern  -> performance pattern
    perfSuite    -> performance suite
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from athena.entities.base import EntityKind

DISCRIMINATOR_FIELD = "type"

DISCRIMINATORS: Dict[str, EntityKind] = {
    "fixture": EntityKind.FIXTURE,
    "test": EntityKind.FUNCTIONAL_TEST,
    "suite": EntityKind.FUNCTIONAL_SUITE,
    "perfRun": EntityKind.PERFORMANCE_RUN,
    "perfPattern": EntityKind.PERFORMANCE_PATTERN,
    "perfSuite": EntityKind.PERFORMANCE_SUITE,
}


def _discriminator(record: Any) -> Optional[str]:
    config = record if isinstance(record, Mapping) else getattr(record, "config", None)
    if not isinstance(config, Mapping):
        return None
    value = config.get(DISCRIMINATOR_FIELD)
    return value if isinstance(value, str) else None


def classify(record: Any) -> Optional[EntityKind]:
    """Return the entity kind of a record, or None when it matches no kind."""
    return DISCRIMINATORS.get(_discriminator(record) or "")


def _make_predicate(kind: EntityKind) -> Callable[[Any], bool]:
    def predicate(record: Any) -> bool:
        return classify(record) is kind

    predicate.__name__ = f"is_{kind.name.lower()}"
    predicate.__doc__ = f"Whether the record classifies as a {kind.value} entity."
    return predicate


is_fixture = _make_predicate(EntityKind.FIXTURE)
is_functional_test = _make_predicate(EntityKind.FUNCTIONAL_TEST)
is_functional_suite = _make_predicate(EntityKind.FUNCTIONAL_SUITE)
is_performance_run = _make_predicate(EntityKind.PERFORMANCE_RUN)
is_performance_pattern = _make_predicate(EntityKind.PERFORMANCE_PATTERN)
is_performance_suite = _make_predicate(EntityKind.PERFORMANCE_SUITE)

PREDICATES: Dict[EntityKind, Callable[[Any], bool]] = {
    EntityKind.FIXTURE: is_fixture,
    EntityKind.FUNCTIONAL_TEST: is_functional_test,
    EntityKind.FUNCTIONAL_SUITE: is_functional_suite,
    EntityKind.PERFORMANCE_RUN: is_performance_run,
    EntityKind.PERFORMANCE_PATTERN: is_performance_pattern,
    EntityKind.PERFORMANCE_SUITE: is_performance_suite,
}
