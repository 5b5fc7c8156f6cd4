import pytest
from hypothesis import given
from hypothesis import strategies as st

from craftnet.physics import Aabb, is_solid, next_player_position


class _World:
    def __init__(self, rule):
        self.rule = rule

    def get_block(self, x, y, z):
        return self.rule(x, y, z)


AIR = _World(lambda x, y, z: 0)


def test_is_solid_known_blocks():
    assert is_solid(1) is True
    assert is_solid(0) is False
    assert is_solid(8) is False
    assert is_solid(175) is False


def test_translated_moves_both_corners():
    box = Aabb((0.0, 0.0, 0.0), (1.0, 2.0, 3.0)).translated(1, -1, 2)
    assert box == Aabb((1.0, -1.0, 2.0), (2.0, 1.0, 5.0))


def test_collides_overlap_and_touching():
    a = Aabb((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    assert a.collides(Aabb((0.5, 0.5, 0.5), (1.5, 1.5, 1.5)))
    assert not a.collides(a.translated(1, 0, 0))
    assert not a.collides(a.translated(0, 0, -2))


def test_move_out_of_positive_direction_keeps_size():
    player = Aabb((0.8, 0.0, 0.0), (1.4, 1.8, 0.6))
    wall = Aabb((1.0, 0.0, 0.0), (2.0, 1.0, 1.0))
    moved = player.move_out_of(wall, (0.5, 0.0, 0.0))
    assert moved.max[0] < wall.min[0]
    assert moved.max[0] - moved.min[0] == pytest.approx(0.6)
    assert not moved.collides(wall)
    assert moved.min[1:] == player.min[1:]


def test_move_out_of_negative_direction():
    player = Aabb((0.2, 9.5, 0.2), (0.8, 11.3, 0.8))
    floor = Aabb((0.0, 9.0, 0.0), (1.0, 10.0, 1.0))
    moved = player.move_out_of(floor, (0.0, -0.5, 0.0))
    assert moved.min[1] > floor.max[1]
    assert moved.max[1] - moved.min[1] == pytest.approx(1.8)
    assert not moved.collides(floor)


def test_free_fall_in_air():
    assert next_player_position(AIR, (0.5, 10.0, 0.5), (0.0, -0.5, 0.0)) == (0.5, 9.5, 0.5)


def test_landing_on_floor():
    world = _World(lambda x, y, z: 1 if y == 9 else 0)
    pos = next_player_position(world, (0.2, 10.0, 0.2), (0.0, -0.5, 0.0))
    assert pos[1] > 10.0
    assert pos[1] == pytest.approx(10.0, abs=1e-3)
    assert (pos[0], pos[2]) == (0.2, 0.2)


def test_water_does_not_block():
    world = _World(lambda x, y, z: 8 if y == 9 else 0)
    pos = next_player_position(world, (0.2, 10.0, 0.2), (0.0, -0.5, 0.0))
    assert pos == next_player_position(AIR, (0.2, 10.0, 0.2), (0.0, -0.5, 0.0))


def test_walking_into_wall():
    world = _World(lambda x, y, z: 1 if x == 1 else 0)
    pos = next_player_position(world, (0.3, 0.0, 0.5), (0.5, 0.0, 0.0))
    assert pos[0] + 0.6 < 1.0
    assert pos[0] == pytest.approx(0.4, abs=1e-3)
    assert pos[1:] == (0.0, 0.5)


@given(
    position=st.tuples(*[st.floats(-100, 100) for _ in range(3)]),
    velocity=st.tuples(*[st.floats(-1, 1) for _ in range(3)]),
)
def test_air_never_changes_motion(position, velocity):
    result = next_player_position(AIR, position, velocity)
    assert result == tuple(p + v for p, v in zip(position, velocity))