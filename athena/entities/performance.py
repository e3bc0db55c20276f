"""
Performance Entities.

Performance definitions nest two levels deep:

    PerformanceSuiteEntity --patterns--> PerformancePatternEntity --runs--> PerformanceRunEntity

Suites declare pattern names under ``patterns``; patterns declare run names
under ``runs``. Children are always fresh instances owned by one parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from athena.entities.base import Entity, EntityKind, get_refs

SUITE_PATTERNS_FIELD = "patterns"
PATTERN_RUNS_FIELD = "runs"


@dataclass(eq=False)
class PerformanceRunEntity(Entity):
    """A single performance run. Leaf entity."""

    KIND = EntityKind.PERFORMANCE_RUN


@dataclass(eq=False)
class PerformancePatternEntity(Entity):
    """
    A performance pattern.

    Attributes:
        runs: Attached performance runs, in resolution order.
    """

    KIND = EntityKind.PERFORMANCE_PATTERN

    runs: List[PerformanceRunEntity] = field(default_factory=list)

    @property
    def children(self) -> List[Entity]:
        return list(self.runs)

    def has_perf_runs_refs(self) -> bool:
        return bool(self.get_perf_runs_refs())

    def get_perf_runs_refs(self) -> List[str]:
        return get_refs(self.config, PATTERN_RUNS_FIELD)

    def add_performance_run(self, run: PerformanceRunEntity) -> None:
        self.runs.append(run)


@dataclass(eq=False)
class PerformanceSuiteEntity(Entity):
    """
    A performance suite.

    Attributes:
        patterns: Attached performance patterns, in resolution order.
    """

    KIND = EntityKind.PERFORMANCE_SUITE

    patterns: List[PerformancePatternEntity] = field(default_factory=list)

    @property
    def children(self) -> List[Entity]:
        return list(self.patterns)

    def has_perf_pattern_refs(self) -> bool:
        return bool(self.get_perf_patterns_refs())

    def get_perf_patterns_refs(self) -> List[str]:
        return get_refs(self.config, SUITE_PATTERNS_FIELD)

    def add_performance_pattern(self, pattern: PerformancePatternEntity) -> None:
        self.patterns.append(pattern)
