"""
Entity Manager Module.

Implements the EntityManager class that builds the test entity graph:
- Discovers and parses every definition file under the tests directory.
- Classifies each record into one of the six entity kinds.
- Resolves suite -> test, suite -> pattern and pattern -> run references,
  attaching freshly created child entities to their containers.
- Exposes read-only queries over the resulting ordered entity collection.

The graph is built once, synchronously, when the manager is constructed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from athena.config.settings import Settings
from athena.diagnostics import DiagnosticsSink, LoguruSink
from athena.entities.base import EntityKind
from athena.entities.collection import EntityCollection
from athena.entities.definition_file import DefinitionFile
from athena.entities.fixture import FixtureEntity
from athena.entities.functional import FunctionalSuiteEntity, FunctionalTestEntity
from athena.entities.performance import (
    PerformancePatternEntity,
    PerformanceRunEntity,
    PerformanceSuiteEntity,
)
from athena.managers.record_index import RecordIndex
from athena.managers.test_files import discover_test_files, load_test_files

FUNCTIONAL_LOG_FORMAT = "[Functional Entity Parsing]"
PERFORMANCE_LOG_FORMAT = "[Performance Entity Parsing]"


class EntityManager:
    """
    Builds and queries the test entity graph.

    Construction runs a fixed sequence of phases, each appending to the
    top-level collection: fixtures, top-level performance runs, functional
    suites (with their tests), then performance suites (with their patterns
    and runs). Every phase scans the full record set.

    Usage::

        manager = EntityManager({"testsDirPath": "tests/definitions"})

        for suite in manager.get_all_functional_suites():
            print(suite.name, [test.name for test in suite.tests])

    Attributes:
        settings: Settings the graph was built from.
        log: Diagnostics sink receiving non-fatal warnings.
        test_files: Raw records loaded from disk, in discovery order.
        entities: Ordered top-level entity collection.
    """

    def __init__(
        self,
        settings: Union[Settings, Mapping[str, Any]],
        log: Optional[DiagnosticsSink] = None,
    ) -> None:
        """
        Initialize the manager and build the entity graph.

        Args:
            settings: Settings instance, or a mapping accepted by Settings.from_mapping.
            log: Diagnostics sink (a LoguruSink is created if not provided).

        Raises:
            DefinitionFileError: If the tests directory or a definition file
                cannot be loaded. No partial manager is produced.
            ConfigurationError: If a settings mapping is missing testsDirPath.
        """
        self.settings = settings if isinstance(settings, Settings) else Settings.from_mapping(settings)
        self.log = log if log is not None else LoguruSink(component="entity_manager")
        self.test_files: List[DefinitionFile] = []
        self.entities = EntityCollection()
        self._index = RecordIndex([])

        self._parse_entities()

    # public

    def get_all_functional_suites(self) -> EntityCollection:
        """Return all functional suites, in collection order."""
        return self.entities.of_kind(EntityKind.FUNCTIONAL_SUITE)

    def get_all_performance_suites(self) -> EntityCollection:
        """Return all performance suites, in collection order."""
        return self.entities.of_kind(EntityKind.PERFORMANCE_SUITE)

    def get_all_performance_runs(self) -> EntityCollection:
        """Return top-level performance runs (not those nested in patterns)."""
        return self.entities.of_kind(EntityKind.PERFORMANCE_RUN)

    def get_all_fixtures(self, as_list: bool = False) -> Union[EntityCollection, List[FixtureEntity]]:
        """
        Return all fixture entities.

        Args:
            as_list: Return a plain list instead of an EntityCollection.
        """
        fixtures = self.entities.of_kind(EntityKind.FIXTURE)
        if as_list:
            return fixtures.to_list()
        return fixtures

    def get_indie_functional_tests(self) -> EntityCollection:
        """
        Return top-level functional tests that declare no suite references.

        Functional tests only reach the top-level collection when the
        ``include_independent_tests`` setting is enabled.
        """
        return self.entities.filter(
            lambda entity: entity.kind is EntityKind.FUNCTIONAL_TEST and entity.has_no_suite_refs()
        )

    def get_functional_suite_by(self, argument: str, value: Any) -> Optional[FunctionalSuiteEntity]:
        """
        Return the first functional suite whose config ``argument`` equals ``value``.

        Suites that do not define ``argument`` are reported with a warning
        and treated as non-matching.
        """
        for suite in self.get_all_functional_suites():
            if argument not in suite.config:
                self.log.warning(
                    f"Attempted to filter functional suites by a given argument "
                    f"[{argument}] that does not exist!",
                    argument=argument,
                    suite=suite.name,
                )
                continue
            if suite.config[argument] == value:
                return suite
        return None

    # private

    def _get_test_files(self) -> List[Path]:
        """Return the definition file paths under the tests directory."""
        return discover_test_files(
            self.settings.tests_dir_path,
            self.settings.test_file_patterns,
        )

    def _parse_all_test_files(self) -> None:
        """Load every definition file and index the records by kind and name."""
        self.test_files = load_test_files(self._get_test_files())
        self._index = RecordIndex(self.test_files)
        self.log.debug(
            f"Loaded {len(self.test_files)} definition files "
            f"({len(self._index)} classified) from {self.settings.tests_dir_path}",
            tests_dir_path=str(self.settings.tests_dir_path),
        )

    def _parse_fixtures(self) -> None:
        """Instantiate fixtures."""
        fixtures = [
            FixtureEntity.from_record(record)
            for record in self._index.records(EntityKind.FIXTURE)
        ]
        self.entities.extend(fixtures)

    def _parse_perf_runs(self) -> None:
        """Instantiate top-level performance runs."""
        perf_runs = [
            PerformanceRunEntity.from_record(record)
            for record in self._index.records(EntityKind.PERFORMANCE_RUN)
        ]
        self.entities.extend(perf_runs)

    def _parse_functional_suite(self, suite: DefinitionFile) -> FunctionalSuiteEntity:
        """
        Instantiate a functional suite and attach its referenced tests.

        Tests are attached in discovery order. Referenced names without a
        matching functional test are ignored.
        """
        suite_instance = FunctionalSuiteEntity.from_record(suite)

        if not suite_instance.has_tests_refs():
            self.log.warning(
                f'{FUNCTIONAL_LOG_FORMAT} The "{suite_instance.name}" functional '
                f"suite has no test references defined.",
                suite=suite_instance.name,
                path=str(suite_instance.path),
            )
            return suite_instance

        test_refs = suite_instance.get_tests_refs()
        for functional_test in self._index.find(EntityKind.FUNCTIONAL_TEST, test_refs):
            suite_instance.add_test(FunctionalTestEntity.from_record(functional_test))

        return suite_instance

    def _parse_functional_tests(self) -> None:
        """
        Parse functional suites and, when enabled, independent functional tests.
        """
        suites = [
            self._parse_functional_suite(record)
            for record in self._index.records(EntityKind.FUNCTIONAL_SUITE)
        ]
        self.entities.extend(suites)

        if self.settings.include_independent_tests:
            independent = [
                FunctionalTestEntity.from_record(record)
                for record in self._index.records(EntityKind.FUNCTIONAL_TEST)
            ]
            self.entities.extend(test for test in independent if test.has_no_suite_refs())

    def _parse_performance_pattern(self, pattern: DefinitionFile) -> PerformancePatternEntity:
        """Instantiate a performance pattern and attach its referenced runs."""
        pattern_instance = PerformancePatternEntity.from_record(pattern)

        if not pattern_instance.has_perf_runs_refs():
            self.log.warning(
                f"{PERFORMANCE_LOG_FORMAT} The {pattern_instance.name} performance "
                f"pattern has no performance runs referenced.",
                pattern=pattern_instance.name,
                path=str(pattern_instance.path),
            )
            return pattern_instance

        run_refs = pattern_instance.get_perf_runs_refs()
        for missing in self._index.missing(EntityKind.PERFORMANCE_RUN, run_refs):
            self.log.warning(
                f"{PERFORMANCE_LOG_FORMAT} The {pattern_instance.name} performance "
                f"pattern references an unknown performance run [{missing}].",
                pattern=pattern_instance.name,
                reference=missing,
            )

        for perf_run in self._index.find(EntityKind.PERFORMANCE_RUN, run_refs):
            pattern_instance.add_performance_run(PerformanceRunEntity.from_record(perf_run))

        return pattern_instance

    def _parse_performance_suite(self, suite: DefinitionFile) -> PerformanceSuiteEntity:
        """Instantiate a performance suite with its patterns and their runs."""
        suite_instance = PerformanceSuiteEntity.from_record(suite)

        if not suite_instance.has_perf_pattern_refs():
            self.log.warning(
                f"{PERFORMANCE_LOG_FORMAT} The {suite_instance.name} performance suite "
                f"has no performance patterns referenced.",
                suite=suite_instance.name,
                path=str(suite_instance.path),
            )
            return suite_instance

        pattern_refs = suite_instance.get_perf_patterns_refs()
        for missing in self._index.missing(EntityKind.PERFORMANCE_PATTERN, pattern_refs):
            self.log.warning(
                f"{PERFORMANCE_LOG_FORMAT} The {suite_instance.name} performance suite "
                f"references an unknown performance pattern [{missing}].",
                suite=suite_instance.name,
                reference=missing,
            )

        for perf_pattern in self._index.find(EntityKind.PERFORMANCE_PATTERN, pattern_refs):
            suite_instance.add_performance_pattern(self._parse_performance_pattern(perf_pattern))

        return suite_instance

    def _parse_performance_tests(self) -> None:
        """Parse performance suites, appended after all functional entities."""
        suites = [
            self._parse_performance_suite(record)
            for record in self._index.records(EntityKind.PERFORMANCE_SUITE)
        ]
        self.entities.extend(suites)

    def _parse_entities(self) -> None:
        """Parse all test files, fixtures, functional and performance tests."""
        self._parse_all_test_files()
        self._parse_fixtures()
        self._parse_perf_runs()
        self._parse_functional_tests()
        self._parse_performance_tests()
        self.log.info(
            f"Entity graph built: {len(self.entities)} top-level entities",
            entities=len(self.entities),
        )
