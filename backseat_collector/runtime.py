"""Loading brains and running them against the world."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Mapping, Sequence

from .host_api import IMPORT_MODULE, Caller, ModuleInternalError, add_to_linker
from .native import Memory
from .status import StatusCode
from .world import Drone, World

MEMORY_SIZE = 65536

BrainModule = Callable[[Mapping[str, Callable[..., int]], Memory], Any]


@dataclass
class BrainStats:
    """Bookkeeping kept for each brain."""

    message: str | None = None
    wall_clock_time: float = 0.0
    gas_consumed: int = 0


class BrainCtx:
    """What a brain may see during one run: its linked drones and all drones."""

    def __init__(
        self,
        stats: BrainStats,
        links: Sequence[int] | None,
        drones: Mapping[int, Drone],
    ) -> None:
        self.stats = stats
        self.links = links
        self.drones = drones

    def drone_count(self) -> int:
        return len(self.drones)

    def get_drone(self, drone_id: int) -> Drone:
        """Find a linked drone by its id."""
        if self.links is not None:
            for entity in self.links:
                drone = self.drones.get(entity)
                if drone is not None and drone.id == drone_id:
                    return drone
        raise ModuleInternalError(StatusCode.NOT_FOUND)

    def get_drone_at(self, drone_index: int) -> Drone:
        """Return the linked drone at the given position."""
        if self.links is not None and 0 <= drone_index < len(self.links):
            drone = self.drones.get(self.links[drone_index])
            if drone is not None:
                return drone
        raise ModuleInternalError(StatusCode.NOT_FOUND)


class BrainEngine:
    """Shared linker holding the host functions every brain imports."""

    def __init__(self) -> None:
        self.linker: dict[str, dict[str, Callable[..., int]]] = {}
        add_to_linker(self.linker)


def _export(instance: Any, name: str) -> Callable[[], None]:
    func = getattr(instance, name, None)
    if not callable(func):
        raise LookupError(f"brain module has no export {name!r}")
    return func


class BrainRuntime:
    """One instantiated brain with its own memory."""

    def __init__(self, engine: BrainEngine, module: BrainModule) -> None:
        memory = Memory(MEMORY_SIZE)
        self._caller = Caller(exports={"memory": memory})
        imports = {
            name: partial(func, self._caller)
            for name, func in engine.linker.get(IMPORT_MODULE, {}).items()
        }
        instance = module(imports, memory)

        init = _export(instance, "brain_init")
        self._update = _export(instance, "brain_update")
        self._shutdown = _export(instance, "brain_shutdown")

        init()

    def run(self, ctx: BrainCtx) -> None:
        """Run one update of the brain with ctx visible to the host functions."""
        self._caller.brain_ctx = ctx
        try:
            self._update()
        finally:
            self._caller.brain_ctx = None


class BrainRunner:
    """A brain runtime guarded for exclusive use, with its stats."""

    def __init__(self, engine: BrainEngine, module: BrainModule) -> None:
        self._runtime = BrainRuntime(engine, module)
        self._lock = threading.Lock()
        self.stats = BrainStats()

    def run(self, ctx: BrainCtx) -> None:
        with self._lock:
            self._runtime.run(ctx)


def run_brains(world: World) -> None:
    """Run every brain in the world once."""
    drones = world.drones()
    for entity, runner in world.brains().items():
        ctx = BrainCtx(runner.stats, world.links(entity), drones)
        runner.run(ctx)