"""Status codes, errors and the data exchanged between a brain and its host."""

from __future__ import annotations

import enum
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator

_POS_LEN = 5
_STATUS_FORMAT = struct.Struct("<5f")


class ApiError(Exception):
    """Base class of errors reported by the brain API."""


class HostError(ApiError):
    """The host failed while serving a request."""


class ArgumentError(ApiError):
    """A request carried an invalid argument."""


class NotFoundError(ApiError):
    """The requested object does not exist."""


class StatusCode(enum.IntEnum):
    """Numeric status returned across the brain/host boundary."""

    OK = 0
    HOST_ERROR = 1
    ARGUMENT_ERROR = 2
    NOT_FOUND = 3

    def to_result(self) -> None:
        """Return quietly for OK, otherwise raise the matching ApiError."""
        error = _ERRORS.get(self)
        if error is not None:
            raise error(self.name)

    def to_num(self) -> int:
        return int(self.value)

    @classmethod
    def from_num(cls, val: int) -> StatusCode:
        """Decode a status number; unknown values count as a host error."""
        try:
            return cls(val)
        except ValueError:
            return cls.HOST_ERROR


_ERRORS: dict[StatusCode, type[ApiError]] = {
    StatusCode.HOST_ERROR: HostError,
    StatusCode.ARGUMENT_ERROR: ArgumentError,
    StatusCode.NOT_FOUND: NotFoundError,
}


@dataclass(frozen=True)
class DroneStatus:
    """State of one drone, laid out as five little-endian 32-bit floats."""

    pos: tuple[float, ...] = (0.0,) * _POS_LEN

    SIZE: ClassVar[int] = _STATUS_FORMAT.size

    def __post_init__(self) -> None:
        pos = tuple(float(value) for value in self.pos)
        if len(pos) != _POS_LEN:
            raise ValueError(f"pos needs {_POS_LEN} values, got {len(pos)}")
        object.__setattr__(self, "pos", pos)

    def to_bytes(self) -> bytes:
        return _STATUS_FORMAT.pack(*self.pos)

    @classmethod
    def from_bytes(cls, data: bytes) -> DroneStatus:
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        return cls(_STATUS_FORMAT.unpack(bytes(data)))


class Drone(ABC):
    """A drone a brain can inspect."""

    @abstractmethod
    def status(self) -> DroneStatus:
        """Return the drone's current status, raising ApiError on failure."""


class BrainApi(ABC):
    """What the host offers to a running brain."""

    @abstractmethod
    def drones(self) -> Iterator[Drone]:
        """Iterate over the drones controlled by this brain."""