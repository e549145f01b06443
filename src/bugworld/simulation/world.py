"""World container - owns every entity, keyed by identifier."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .entity import Bug, Entity, Food


@dataclass
class World:
    """
    The registry of all entities in the simulation.

    Identifiers are allocated from ``seed``, which only ever grows, so an
    identifier is never handed out twice even after its entity is removed.
    """

    seed: int = 0
    entities: dict[int, Entity] = field(default_factory=dict)

    def insert(self, entity: Entity) -> int:
        """Add an entity under a freshly allocated id and return the id."""
        entity_id = self.seed
        self.seed += 1
        self.entities[entity_id] = entity
        return entity_id

    def replace(self, entity_id: int, entity: Entity) -> None:
        """Overwrite the entity stored under an existing id."""
        self.entities[entity_id] = entity

    def remove(self, entity_id: int) -> None:
        """Delete an entity. Its id is not reused."""
        del self.entities[entity_id]

    def get(self, entity_id: int) -> Entity | None:
        """Look up an entity, or None if it is gone."""
        return self.entities.get(entity_id)

    def copy(self) -> World:
        """Return an independent world with the same entities and seed."""
        return World(seed=self.seed, entities=dict(self.entities))

    def bugs(self) -> Iterator[tuple[int, Bug]]:
        """Iterate over (id, bug) pairs in ascending id order."""
        for entity_id in sorted(self.entities):
            entity = self.entities[entity_id]
            if isinstance(entity, Bug):
                yield entity_id, entity

    def food(self) -> Iterator[tuple[int, Food]]:
        """Iterate over (id, food) pairs in ascending id order."""
        for entity_id in sorted(self.entities):
            entity = self.entities[entity_id]
            if isinstance(entity, Food):
                yield entity_id, entity

    def __len__(self) -> int:
        return len(self.entities)


def empty() -> World:
    """Create a world with no entities."""
    return World()


def insert(entity: Entity, world: World) -> tuple[int, World]:
    """Insert into a copy of ``world``, leaving the original untouched."""
    new_world = world.copy()
    entity_id = new_world.insert(entity)
    return entity_id, new_world
