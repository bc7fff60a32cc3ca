"""Host functions a brain imports from the bsc_brain module."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Callable, MutableMapping

from .native import Memory
from .status import DroneStatus, StatusCode

IMPORT_MODULE = "bsc_brain"

_U32 = struct.Struct("<I")


class ModuleExternalError(Exception):
    """A failure on the host side, reported to the brain as a host error."""


class ModuleInternalError(Exception):
    """A failure that is handed back to the brain as a status code."""

    def __init__(self, code: StatusCode) -> None:
        super().__init__(code.name)
        self.code = code


@dataclass
class Caller:
    """The calling brain instance: its exports and the context of the current run."""

    exports: dict[str, Any] = field(default_factory=dict)
    brain_ctx: Any = None

    def get_export(self, name: str) -> Any:
        return self.exports.get(name)

    @property
    def ctx(self) -> Any:
        if self.brain_ctx is None:
            raise RuntimeError("Brain ctx not set while wasm was running")
        return self.brain_ctx


def unwrap_result(func: Callable[[], None]) -> StatusCode:
    """Run func and turn its outcome into the status code handed to the brain."""
    try:
        func()
    except ModuleExternalError as err:
        print(f"Host error running module: {err}")
        return StatusCode.HOST_ERROR
    except ModuleInternalError as err:
        return err.code
    return StatusCode.OK


def _get_mem(caller: Caller) -> Memory:
    memory = caller.get_export("memory")
    if not isinstance(memory, Memory):
        raise ModuleExternalError("Could not find wasm memory")
    return memory


def write_mem(caller: Caller, ptr: int, data: bytes) -> None:
    """Write bytes into the brain's memory; a bad pointer is an argument error."""
    memory = _get_mem(caller)
    try:
        memory.write(ptr, data)
    except IndexError:
        raise ModuleInternalError(StatusCode.ARGUMENT_ERROR) from None


def drone_count(caller: Caller) -> int:
    return caller.ctx.drone_count()


def drone_id(caller: Caller, drone: int, drone_id_ptr: int) -> int:
    """Write the id of the brain's drone at index `drone` to drone_id_ptr."""

    def call() -> None:
        found = caller.ctx.get_drone_at(drone)
        write_mem(caller, drone_id_ptr, _U32.pack(found.id))

    return unwrap_result(call).to_num()


def drone_status(caller: Caller, drone: int, status_ptr: int) -> int:
    """Write the status of the brain's drone with id `drone` to status_ptr."""

    def call() -> None:
        found = caller.ctx.get_drone(drone)
        write_mem(caller, status_ptr, DroneStatus(found.pos).to_bytes())

    return unwrap_result(call).to_num()


def add_to_linker(linker: MutableMapping[str, dict[str, Callable[..., int]]]) -> None:
    """Register the host functions under the bsc_brain import module."""
    functions = linker.setdefault(IMPORT_MODULE, {})
    for func in (drone_count, drone_id, drone_status):
        name = func.__name__
        if name in functions:
            raise ValueError(f"{IMPORT_MODULE}::{name} is already defined")
        functions[name] = func