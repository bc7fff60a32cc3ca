"""A minimal brain that polls the status of every drone it controls."""

from __future__ import annotations

from typing import Callable, Mapping

from .entry import BrainEntry, Main
from .native import Memory, NativeApi
from .status import ApiError, BrainApi


class PingMain(Main):
    """Asks each drone for its status every tick and ignores the answer."""

    def update(self, api: BrainApi) -> None:
        for drone in api.drones():
            try:
                drone.status()
            except ApiError:
                pass


def module(imports: Mapping[str, Callable[..., int]], memory: Memory) -> BrainEntry[PingMain]:
    """Build the loadable brain entry for PingMain over the given host imports."""
    return BrainEntry(PingMain, lambda: NativeApi(imports, memory))