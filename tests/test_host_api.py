import struct

import pytest

from backseat_collector.host_api import (
    Caller,
    ModuleExternalError,
    ModuleInternalError,
    add_to_linker,
    drone_count,
    drone_id,
    drone_status,
    unwrap_result,
    write_mem,
)
from backseat_collector.native import Memory
from backseat_collector.runtime import BrainCtx, BrainStats
from backseat_collector.status import DroneStatus, StatusCode
from backseat_collector.world import Drone, World

POS = (1.0, 2.5, -3.0, 0.5, 4.0)


@pytest.fixture
def caller():
    world = World()
    brain = world.spawn_brain(object())
    world.spawn_drone(Drone(id=42, pos=POS), brain)
    world.spawn_drone(Drone(id=7))
    ctx = BrainCtx(BrainStats(), world.links(brain), world.drones())
    return Caller(exports={"memory": Memory(64)}, brain_ctx=ctx)


def test_unwrap_result_ok():
    assert unwrap_result(lambda: None) is StatusCode.OK


def test_unwrap_result_internal_code():
    def fail():
        raise ModuleInternalError(StatusCode.NOT_FOUND)

    assert unwrap_result(fail) is StatusCode.NOT_FOUND


def test_unwrap_result_external_is_host_error(capsys):
    def fail():
        raise ModuleExternalError("boom")

    assert unwrap_result(fail) is StatusCode.HOST_ERROR
    assert "Host error running module: boom" in capsys.readouterr().out


def test_write_mem_out_of_range_is_argument_error(caller):
    with pytest.raises(ModuleInternalError) as info:
        write_mem(caller, 62, b"\x01\x02\x03\x04")
    assert info.value.code is StatusCode.ARGUMENT_ERROR


def test_write_mem_without_memory_is_external_error():
    with pytest.raises(ModuleExternalError):
        write_mem(Caller(), 0, b"\x00")


def test_drone_count_counts_every_drone(caller):
    assert drone_count(caller) == 2


def test_drone_count_without_ctx_raises():
    with pytest.raises(RuntimeError):
        drone_count(Caller(exports={"memory": Memory(8)}))


def test_drone_id_writes_little_endian_id(caller):
    assert drone_id(caller, 0, 8) == StatusCode.OK.to_num()
    assert caller.exports["memory"].read(8, 4) == struct.pack("<I", 42)


def test_drone_id_unlinked_index_is_not_found(caller):
    assert drone_id(caller, 1, 0) == StatusCode.NOT_FOUND.to_num()


def test_drone_id_bad_pointer_is_argument_error(caller):
    assert drone_id(caller, 0, 1000) == StatusCode.ARGUMENT_ERROR.to_num()


def test_drone_status_round_trips_position(caller):
    assert drone_status(caller, 42, 4) == StatusCode.OK.to_num()
    data = caller.exports["memory"].read(4, DroneStatus.SIZE)
    assert DroneStatus.from_bytes(data) == DroneStatus(POS)


def test_drone_status_unknown_id_is_not_found(caller):
    assert drone_status(caller, 7, 0) == StatusCode.NOT_FOUND.to_num()


def test_drone_status_without_memory_is_host_error(caller):
    caller.exports.clear()
    assert drone_status(caller, 42, 0) == StatusCode.HOST_ERROR.to_num()


def test_add_to_linker_registers_functions():
    linker = {}
    add_to_linker(linker)
    assert set(linker["bsc_brain"]) == {"drone_count", "drone_id", "drone_status"}


def test_add_to_linker_twice_raises():
    linker = {}
    add_to_linker(linker)
    with pytest.raises(ValueError):
        add_to_linker(linker)