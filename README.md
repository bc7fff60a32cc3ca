# backseat-collector

A small drone simulation. A `World` holds drones and brains. A drone can be
linked to one brain. A brain is a Python object with three hooks:
`brain_init`, `brain_update` and `brain_shutdown`. On every tick the host
calls `brain_update` on each brain. The brain sees its drones only through a
narrow host API. It can count drones, look up the ids of the drones linked to
it, and read their status. The host writes these answers into the brain's own
block of `Memory`.

## Installation

```
pip install .
```

You need Python 3.10 or later. The package has no runtime dependencies.

## Running the simulation

```
backseat-collector
backseat-collector --ticks 100
```

The command builds a `World` and a `BrainEngine`. It then calls
`spawn_entities`, which spawns a brain running the bundled ping module and one
default drone linked to that brain. After that it calls `run_brains` once per
tick. With no `--ticks` option it keeps running until it is interrupted with
Ctrl-C. A negative `--ticks` value is rejected. The command prints nothing and
exits with status 0.

You can also start it with `python -m backseat_collector.app`.

## Writing a brain

A brain subclasses `Main` from `backseat_collector.entry` and implements
`update(api)`. The `api` argument is a `BrainApi`:

- `drones()` yields drone handles.
- `status()` on a handle returns a `DroneStatus`. Its `pos` is a tuple of five
  floats.

By default `Main.init(api)` builds the brain with no arguments. Override it if
the brain needs the API when it starts.

`BrainEntry(main_type, api_factory)` wraps a `Main` subclass in the three
hooks:

- `brain_init()` creates the API and the brain.
- `brain_update()` runs one update. It does nothing before init or after
  shutdown.
- `brain_shutdown()` drops both.

A brain module is a callable `module(imports, memory)` that returns such an
entry. `NativeApi(imports, memory)` from `backseat_collector.native` is the API
that calls the host functions and reads the results out of memory.
`backseat_collector.ping` has the reference brain, `PingMain`, and its
`module` function.

```python
from backseat_collector.entry import BrainEntry, Main
from backseat_collector.native import NativeApi
from backseat_collector.runtime import BrainEngine, BrainRunner, run_brains
from backseat_collector.world import Drone, World


class Reporter(Main):
    def update(self, api):
        for drone in api.drones():
            print(drone.id, drone.status().pos)


def reporter_module(imports, memory):
    return BrainEntry(Reporter, lambda: NativeApi(imports, memory))


world = World()
engine = BrainEngine()
brain = world.spawn_brain(BrainRunner(engine, reporter_module))
world.spawn_drone(Drone(id=7, pos=(1, 2, 3, 4, 5)), brain)
run_brains(world)  # prints: 7 (1.0, 2.0, 3.0, 4.0, 5.0)
```

`DroneStatus.to_bytes()` and `DroneStatus.from_bytes()` convert a status to and
from its memory layout: five little-endian 32-bit floats, 20 bytes in all.

## Errors

Host calls return a `StatusCode` from `backseat_collector.status`. The codes
are `OK`, `HOST_ERROR`, `ARGUMENT_ERROR` and `NOT_FOUND`.

`StatusCode.from_num()` turns any unknown number into `HOST_ERROR`.
`StatusCode.to_result()` returns quietly for `OK`. For the other codes it
raises the matching exception, each derived from `ApiError`:

- `HostError`
- `ArgumentError`
- `NotFoundError`

`NativeApi.drones()` skips any drone whose id lookup fails. `status()` raises
the error the host reported.

On the host side, `backseat_collector.host_api.unwrap_result` turns outcomes
into codes:

- A `ModuleInternalError` becomes its status code.
- A `ModuleExternalError` is printed as `Host error running module: ...` and
  becomes `HOST_ERROR`.
- Writing outside the brain's memory is an `ARGUMENT_ERROR`.
- Asking for a drone that is not linked to the brain is `NOT_FOUND`.

## Host side

- `backseat_collector.world` holds the `World` and its `Drone` records, which
  have an `id` and a five-component `pos`. It covers spawning brains and
  drones and the links from drones to their brain.
- `backseat_collector.host_api` holds the host functions a brain imports under
  the `bsc_brain` module:
  - `drone_count` counts all drones in the world.
  - `drone_id` takes an index into the brain's linked drones.
  - `drone_status` takes a drone id.

  `add_to_linker` registers these functions, and `Caller` carries the brain's
  exports and the context of the current run.
- `backseat_collector.runtime` holds `BrainEngine`, `BrainRuntime`,
  `BrainRunner`, `BrainCtx` and `BrainStats`:
  - Each `BrainRuntime` gives its brain 64 KiB of `Memory`.
  - `BrainRunner` guards a runtime with a lock.
  - `run_brains(world)` runs every brain once.

## What it does not do

- Nothing in the simulation moves drones. Their positions stay as spawned.
- There is no display of any kind.
- Brains are Python callables in the same process. They are not sandboxed or
  isolated.
- `BrainStats` has fields for a message, wall-clock time and gas consumed, but
  nothing fills them in.

## Tests

```
pip install ".[test]"
pytest
```