"""
Entity Base Module.

Defines the entity kind tag and the fields shared by every entity in the
graph. Each entity class pins its kind once, at class level; consumers
dispatch on ``entity.kind`` rather than on the concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, List


class EntityKind(str, Enum):
    """The six entity kinds a definition file can be classified into."""

    FIXTURE = "fixture"
    FUNCTIONAL_TEST = "functionalTest"
    FUNCTIONAL_SUITE = "functionalSuite"
    PERFORMANCE_RUN = "performanceRun"
    PERFORMANCE_PATTERN = "performancePattern"
    PERFORMANCE_SUITE = "performanceSuite"

    @property
    def is_container(self) -> bool:
        """Whether entities of this kind own child entities."""
        return self in CONTAINER_KINDS


CONTAINER_KINDS = frozenset(
    {
        EntityKind.FUNCTIONAL_SUITE,
        EntityKind.PERFORMANCE_PATTERN,
        EntityKind.PERFORMANCE_SUITE,
    }
)


@dataclass(eq=False)
class Entity:
    """
    Common entity fields.

    Attributes:
        name: Entity name, taken from the definition file.
        path: Absolute path of the definition file.
        config: Parsed definition file contents.
    """

    KIND: ClassVar[EntityKind]

    name: str
    path: Path
    config: Dict[str, Any]

    @property
    def kind(self) -> EntityKind:
        return self.KIND

    @property
    def children(self) -> List["Entity"]:
        """Child entities; always empty for leaf kinds."""
        return []

    @classmethod
    def from_record(cls, record: Any) -> "Entity":
        """Create a fresh entity from a loaded DefinitionFile record."""
        return cls(record.get_name(), record.get_path(), record.get_config())


def get_refs(config: Dict[str, Any], field_name: str) -> List[str]:
    """
    Return the ordered reference names declared under ``field_name``.

    A missing or null field yields an empty list; a single string is
    treated as a one-element list. Any other non-list value (a number,
    a boolean, a mapping) declares no references.
    """
    refs = config.get(field_name)
    if not refs:
        return []
    if isinstance(refs, str):
        return [refs]
    if not isinstance(refs, (list, tuple)):
        return []
    return [str(ref) for ref in refs]
