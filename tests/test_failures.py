import pytest

from cavegen.config import CaveConfig
from cavegen.errors import (
    CapacityError, ConfigError, GenerationError, WallPlacementError,
)
from cavegen.grid import Grid
from cavegen.mapgen.collapse import place_collapsing_spots
from cavegen.mapgen.generator import generate_cave
from cavegen.mapgen.walls import WallSegment, can_place, place_walls
from cavegen.rng import JavaRandom
from cavegen.tiles import EMPTY, START, WALL

def test_capacity_error_reports_both_counts():
    with pytest.raises(CapacityError) as ei:
        generate_cave(CaveConfig(3, 3, 0, 8, seed=1))
    assert ei.value.available == 7 and ei.value.requested == 8
    assert "Not enough empty spaces (7) to place 8 collapsing spots" in str(ei.value)

def test_capacity_checked_before_any_marking():
    g = Grid.empty(3, 3)
    with pytest.raises(CapacityError):
        place_collapsing_spots(g, JavaRandom.seeded(1), 10)
    assert g.count(EMPTY) == 9

def test_wall_exhaustion_is_bounded():
    # At most 7 free cells, so some wall up to #8 must fail.
    with pytest.raises(WallPlacementError) as ei:
        generate_cave(CaveConfig(3, 3, 20, 0, seed=5, max_tries_per_wall=50))
    assert 1 <= ei.value.index <= 8
    assert ei.value.attempts == 50
    assert f"Failed to place wall #{ei.value.index}" in str(ei.value)
    assert isinstance(ei.value, GenerationError)

def test_walls_never_cover_occupied_cells():
    g = Grid.empty(5, 5)
    g.set(2, 0, START)
    assert not can_place(g, WallSegment(row=2, col=0, length=3, horizontal=True))
    assert can_place(g, WallSegment(row=0, col=0, length=5, horizontal=True))
    place_walls(g, JavaRandom.seeded(11), 3)
    assert g.get(2, 0) == START
    assert g.count(WALL) > 0

@pytest.mark.parametrize("args", [
    (2, 3, 0, 0),
    (3, 0, 0, 0),
    (3, 3, -1, 0),
    (3, 3, 0, -2),
    ("3", 3, 0, 0),
    (3.0, 3, 0, 0),
    (True, 3, 0, 0),
])
def test_config_rejected(args):
    with pytest.raises(ConfigError):
        CaveConfig(*args)

def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        CaveConfig(3, 3, 0, 0, max_tries_per_wall=0)
