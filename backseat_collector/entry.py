"""Brain entry points: the user's Main type and the lifecycle around it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from .status import BrainApi

M = TypeVar("M", bound="Main")


class Main(ABC):
    """A brain implementation, updated once per host tick."""

    @classmethod
    def init(cls: type[M], api: BrainApi) -> M:
        """Build the brain; by default with no arguments."""
        return cls()

    @abstractmethod
    def update(self, api: BrainApi) -> None:
        """Run one step of the brain."""


class BrainEntry(Generic[M]):
    """The init/update/shutdown hooks a host calls on a loaded brain."""

    def __init__(self, main_type: type[M], api_factory: Callable[[], BrainApi]) -> None:
        self._main_type = main_type
        self._api_factory = api_factory
        self._state: tuple[M, BrainApi] | None = None

    @property
    def brain(self) -> M | None:
        return self._state[0] if self._state is not None else None

    @property
    def api(self) -> BrainApi | None:
        return self._state[1] if self._state is not None else None

    def brain_init(self) -> None:
        api = self._api_factory()
        instance = self._main_type.init(api)
        self._state = (instance, api)

    def brain_update(self) -> None:
        if self._state is not None:
            brain, api = self._state
            brain.update(api)

    def brain_shutdown(self) -> None:
        self._state = None