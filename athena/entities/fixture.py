"""Fixture entity."""

from __future__ import annotations

from dataclasses import dataclass

from athena.entities.base import Entity, EntityKind


@dataclass(eq=False)
class FixtureEntity(Entity):
    """A fixture definition. Leaf entity with no references."""

    KIND = EntityKind.FIXTURE
