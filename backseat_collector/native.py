"""Brain API backed by host imports and a shared linear memory."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Callable, Iterator, Mapping

from .status import BrainApi, Drone, DroneStatus, StatusCode

_DRONE_ID = struct.Struct("<I")

# Offset of the scratch area the host writes results into.
SCRATCH_PTR = 0


class Memory:
    """A fixed-size block of linear memory shared with the host."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("memory size must not be negative")
        self._data = bytearray(size)

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, ptr: int, size: int) -> None:
        if ptr < 0 or size < 0 or ptr + size > len(self._data):
            raise IndexError(
                f"access of {size} bytes at {ptr} is outside memory of {len(self._data)} bytes"
            )

    def read(self, ptr: int, size: int) -> bytes:
        self._check(ptr, size)
        return bytes(self._data[ptr : ptr + size])

    def write(self, ptr: int, data: bytes) -> None:
        data = bytes(data)
        self._check(ptr, len(data))
        self._data[ptr : ptr + len(data)] = data


class NativeApi(BrainApi):
    """Brain API that calls the host functions drone_count, drone_id and drone_status."""

    def __init__(self, imports: Mapping[str, Callable[..., int]], memory: Memory) -> None:
        self._drone_count = imports["drone_count"]
        self._drone_id = imports["drone_id"]
        self._drone_status = imports["drone_status"]
        self.memory = memory

    def drones(self) -> Iterator[NativeDrone]:
        return self._iter_drones(int(self._drone_count()))

    def _iter_drones(self, count: int) -> Iterator[NativeDrone]:
        for index in range(count):
            code = StatusCode.from_num(self._drone_id(index, SCRATCH_PTR))
            if code is not StatusCode.OK:
                continue
            (drone_id,) = _DRONE_ID.unpack(self.memory.read(SCRATCH_PTR, _DRONE_ID.size))
            yield NativeDrone(drone_id, self)

    def _status_of(self, drone_id: int) -> DroneStatus:
        StatusCode.from_num(self._drone_status(drone_id, SCRATCH_PTR)).to_result()
        return DroneStatus.from_bytes(self.memory.read(SCRATCH_PTR, DroneStatus.SIZE))


@dataclass(frozen=True)
class NativeDrone(Drone):
    """A drone identified by its host id."""

    id: int
    api: NativeApi = field(repr=False, compare=False)

    def status(self) -> DroneStatus:
        return self.api._status_of(self.id)