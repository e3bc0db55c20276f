"""
Entity Model.

The six entity kinds produced from definition files, the raw DefinitionFile
record they are built from, the classifiers that sort records into kinds,
and the ordered collection the EntityManager accumulates them in.
"""

from athena.entities.base import Entity, EntityKind
from athena.entities.classifiers import (
    classify,
    is_fixture,
    is_functional_suite,
    is_functional_test,
    is_performance_pattern,
    is_performance_run,
    is_performance_suite,
)
from athena.entities.collection import EntityCollection
from athena.entities.fixture import FixtureEntity
from athena.entities.functional import FunctionalSuiteEntity, FunctionalTestEntity
from athena.entities.performance import (
    PerformancePatternEntity,
    PerformanceRunEntity,
    PerformanceSuiteEntity,
)
from athena.entities.definition_file import DefinitionFileError, DefinitionFile

__all__ = [
    "DefinitionFileError",
    "Entity",
    "EntityCollection",
    "EntityKind",
    "FixtureEntity",
    "FunctionalSuiteEntity",
    "FunctionalTestEntity",
    "PerformancePatternEntity",
    "PerformanceRunEntity",
    "PerformanceSuiteEntity",
    "DefinitionFile",
    "classify",
    "is_fixture",
    "is_functional_suite",
    "is_functional_test",
    "is_performance_pattern",
    "is_performance_run",
    "is_performance_suite",
]
