"""Drones, brains and the links between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_POS_LEN = 5


@dataclass
class Drone:
    """A drone in the world, known to brains by its id."""

    id: int = 0
    pos: tuple[float, ...] = (0.0,) * _POS_LEN

    def __post_init__(self) -> None:
        pos = tuple(float(value) for value in self.pos)
        if len(pos) != _POS_LEN:
            raise ValueError(f"pos needs {_POS_LEN} values, got {len(pos)}")
        self.pos = pos


class World:
    """Holds brain and drone entities; each drone may be linked to one brain."""

    def __init__(self) -> None:
        self._next_entity = 0
        self._brains: dict[int, Any] = {}
        self._drones: dict[int, Drone] = {}
        self._links: dict[int, list[int]] = {}

    def _new_entity(self) -> int:
        entity = self._next_entity
        self._next_entity += 1
        return entity

    def spawn_brain(self, runner: Any) -> int:
        """Add a brain entity carrying the given runner and return its entity id."""
        entity = self._new_entity()
        self._brains[entity] = runner
        return entity

    def spawn_drone(self, drone: Drone, brain: int | None = None) -> int:
        """Add a drone entity, optionally linked to a brain, and return its entity id."""
        if brain is not None and brain not in self._brains:
            raise KeyError(f"no brain entity {brain}")
        entity = self._new_entity()
        self._drones[entity] = drone
        if brain is not None:
            self._links.setdefault(brain, []).append(entity)
        return entity

    def drone(self, entity: int) -> Drone:
        try:
            return self._drones[entity]
        except KeyError:
            raise KeyError(f"no drone entity {entity}") from None

    def drones(self) -> dict[int, Drone]:
        """All drones by entity id, in spawn order."""
        return dict(self._drones)

    def brains(self) -> dict[int, Any]:
        """All brain runners by entity id, in spawn order."""
        return dict(self._brains)

    def links(self, brain: int) -> tuple[int, ...] | None:
        """Drone entities linked to the brain, or None if it has none."""
        if brain not in self._brains:
            raise KeyError(f"no brain entity {brain}")
        linked = self._links.get(brain)
        return tuple(linked) if linked else None