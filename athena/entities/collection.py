"""
Entity Collection Module.

Ordered, append-only sequence of entities. Insertion order is preserved
exactly; filtering returns a new collection and never mutates the source.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

from athena.entities.base import Entity, EntityKind


class EntityCollection:
    """
    Ordered, append-only collection of entities.

    Usage::

        entities = EntityCollection()
        entities.append(fixture)
        entities.extend(suites)
        suites = entities.of_kind(EntityKind.FUNCTIONAL_SUITE)
    """

    def __init__(self, entities: Optional[Iterable[Entity]] = None) -> None:
        self._entities: List[Entity] = list(entities) if entities else []

    def append(self, entity: Entity) -> None:
        self._entities.append(entity)

    def extend(self, entities: Iterable[Entity]) -> None:
        """Bulk-append entities, keeping their order."""
        self._entities.extend(entities)

    def filter(self, predicate: Callable[[Entity], bool]) -> "EntityCollection":
        return EntityCollection(entity for entity in self._entities if predicate(entity))

    def of_kind(self, kind: EntityKind) -> "EntityCollection":
        return self.filter(lambda entity: entity is not None and entity.kind is kind)

    def first(self) -> Optional[Entity]:
        return self._entities[0] if self._entities else None

    def to_list(self) -> List[Entity]:
        return list(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    def __repr__(self) -> str:
        return f"EntityCollection({len(self._entities)} entities)"
