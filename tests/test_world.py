"""Tests for the world container."""

from bugworld.simulation.entity import Bug, Food
from bugworld.simulation.vector import Vector
from bugworld.simulation.world import World, empty, insert


def test_empty_world():
    world = empty()

    assert world.seed == 0
    assert world.entities == {}
    assert len(world) == 0


def test_insert_allocates_sequential_ids():
    world = World()

    ids = [world.insert(Food(Vector(float(i), 0.0))) for i in range(3)]

    assert ids == [0, 1, 2]
    assert world.seed == 3


def test_ids_are_never_reused():
    world = World()
    world.insert(Food(Vector(0.0, 0.0)))
    second = world.insert(Food(Vector(1.0, 0.0)))

    world.remove(second)
    third = world.insert(Food(Vector(2.0, 0.0)))

    assert third == 2
    assert second not in world.entities
    assert world.seed == 3


def test_replace_keeps_seed():
    world = World()
    bug_id = world.insert(Bug(Vector(0.0, 0.0)))

    world.replace(bug_id, Bug(Vector(5.0, 5.0), nutrition=0.2))

    assert world.seed == 1
    assert world.get(bug_id) == Bug(Vector(5.0, 5.0), nutrition=0.2)


def test_get_missing_entity():
    assert World().get(42) is None


def test_pure_insert_leaves_original_untouched():
    original = empty()

    food_id, updated = insert(Food(Vector(1.0, 1.0)), original)

    assert food_id == 0
    assert updated.seed == 1
    assert updated.entities == {0: Food(Vector(1.0, 1.0))}
    assert original.seed == 0
    assert original.entities == {}


def test_copy_is_independent():
    world = World()
    world.insert(Bug(Vector(0.0, 0.0)))

    clone = world.copy()
    clone.insert(Food(Vector(1.0, 0.0)))
    clone.remove(0)

    assert world.seed == 1
    assert 0 in world.entities
    assert len(world) == 1


def test_bugs_and_food_iterate_by_ascending_id(make_world):
    world = make_world(
        Bug(Vector(0.0, 0.0)),
        Food(Vector(1.0, 0.0)),
        Bug(Vector(2.0, 0.0)),
        Food(Vector(3.0, 0.0)),
    )
    world.replace(0, Bug(Vector(9.0, 9.0)))

    assert [bug_id for bug_id, _ in world.bugs()] == [0, 2]
    assert [food_id for food_id, _ in world.food()] == [1, 3]
