import pytest

from backseat_collector.world import Drone, World


def test_default_drone_has_five_zero_coordinates():
    drone = Drone()
    assert drone.id == 0
    assert drone.pos == (0.0, 0.0, 0.0, 0.0, 0.0)


def test_drone_rejects_wrong_position_length():
    with pytest.raises(ValueError):
        Drone(pos=(1.0, 2.0))


def test_spawned_entities_are_distinct():
    world = World()
    brain = world.spawn_brain(object())
    first = world.spawn_drone(Drone(id=1), brain)
    second = world.spawn_drone(Drone(id=2))
    assert len({brain, first, second}) == 3


def test_drone_lookup_returns_spawned_drone():
    world = World()
    drone = Drone(id=5, pos=(1, 2, 3, 4, 5))
    entity = world.spawn_drone(drone)
    assert world.drone(entity) == drone


def test_unknown_drone_raises_key_error():
    world = World()
    brain = world.spawn_brain(object())
    with pytest.raises(KeyError):
        world.drone(brain)


def test_links_keep_spawn_order():
    world = World()
    brain = world.spawn_brain(object())
    first = world.spawn_drone(Drone(id=1), brain)
    world.spawn_drone(Drone(id=2))
    third = world.spawn_drone(Drone(id=3), brain)
    assert world.links(brain) == (first, third)


def test_brain_without_drones_has_no_links():
    world = World()
    brain = world.spawn_brain(object())
    assert world.links(brain) is None


def test_linking_to_unknown_brain_raises():
    world = World()
    with pytest.raises(KeyError):
        world.spawn_drone(Drone(), 17)


def test_drones_and_brains_are_copies():
    world = World()
    runner = object()
    brain = world.spawn_brain(runner)
    entity = world.spawn_drone(Drone(id=4), brain)
    drones = world.drones()
    drones.clear()
    assert list(world.drones()) == [entity]
    assert world.brains() == {brain: runner}