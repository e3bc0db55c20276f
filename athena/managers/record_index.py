"""
Record Index Module.

Name-indexed lookup of DefinitionFile records per entity kind. Built once from
the full record set; lookups return matches in discovery order regardless
of the order the names are requested in.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from athena.entities.base import EntityKind
from athena.entities.classifiers import classify
from athena.entities.definition_file import DefinitionFile


class RecordIndex:
    """
    Per-kind name index over loaded records.

    Usage::

        index = RecordIndex(test_files)
        tests = index.find(EntityKind.FUNCTIONAL_TEST, ["login", "logout"])
    """

    def __init__(self, records: Iterable[DefinitionFile]) -> None:
        self._by_kind: Dict[EntityKind, List[DefinitionFile]] = defaultdict(list)
        self._by_name: Dict[EntityKind, Dict[str, List[Tuple[int, DefinitionFile]]]] = defaultdict(
            lambda: defaultdict(list)
        )

        for position, record in enumerate(records):
            kind = classify(record)
            if kind is None:
                continue
            self._by_kind[kind].append(record)
            self._by_name[kind][record.name].append((position, record))

    def records(self, kind: EntityKind) -> List[DefinitionFile]:
        """All records of a kind, in discovery order."""
        return list(self._by_kind.get(kind, []))

    def find(self, kind: EntityKind, names: Iterable[str]) -> List[DefinitionFile]:
        """
        Records of ``kind`` whose name is one of ``names``.

        Every record sharing a requested name is returned once, ordered by
        discovery position rather than by the order of ``names``.
        """
        by_name = self._by_name.get(kind, {})
        matches: List[Tuple[int, DefinitionFile]] = []
        for name in dict.fromkeys(names):
            matches.extend(by_name.get(name, []))
        return [record for _, record in sorted(matches, key=lambda match: match[0])]

    def missing(self, kind: EntityKind, names: Iterable[str]) -> List[str]:
        """Requested names with no record of ``kind``, in request order."""
        by_name = self._by_name.get(kind, {})
        return [name for name in dict.fromkeys(names) if name not in by_name]

    def __len__(self) -> int:
        return sum(len(records) for records in self._by_kind.values())
