# src/cavegen/mapgen/collapse.py
import logging
from typing import List

from ..errors import CapacityError
from ..grid import Grid, RC
from ..rng import JavaRandom
from ..tiles import EMPTY, COLLAPSE, MAX_INTENSITY, blocks_intensity

log = logging.getLogger(__name__)

# Moore neighborhood, row-major, center excluded
NEIGHBORS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

def place_collapsing_spots(grid: Grid, rng: JavaRandom, num_collapsing: int) -> List[RC]:
    """
    Shuffle the row-major list of empty cells and mark the first
    num_collapsing of them. Raises CapacityError if there are not enough.
    """
    empties = grid.cells_of(EMPTY)
    log.debug("%d empty cells for %d collapsing spots", len(empties), num_collapsing)
    if len(empties) < num_collapsing:
        raise CapacityError(len(empties), num_collapsing)

    chosen = rng.sample(empties, num_collapsing)
    for (r, c) in chosen:
        grid.set(r, c, COLLAPSE)
    return chosen

def compute_intensity(grid: Grid) -> None:
    """Recompute every cell's hollowness from the current collapse cells."""
    grid.reset_intensity()
    for (r, c) in grid.cells_of(COLLAPSE):
        for dr, dc in NEIGHBORS:
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc):
                continue
            if blocks_intensity(grid.get(nr, nc)):
                continue
            grid.set_intensity(nr, nc, min(MAX_INTENSITY, grid.intensity(nr, nc) + 1))
