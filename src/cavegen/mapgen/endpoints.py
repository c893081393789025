# src/cavegen/mapgen/endpoints.py
import logging
from typing import Tuple

from ..grid import Grid
from ..rng import JavaRandom
from ..tiles import START, FINISH

log = logging.getLogger(__name__)

def place_endpoints(grid: Grid, rng: JavaRandom) -> Tuple[int, int]:
    """
    Start goes in column 0, finish in the last column, each on an
    independently drawn row. Rows may coincide; the two cells never do
    because width >= 3. Returns (start_row, finish_row).
    """
    start_row = rng.next_int(grid.height)
    grid.set(start_row, 0, START)

    finish_row = rng.next_int(grid.height)
    # Only a one-column field could put both markers on the same cell.
    while finish_row == start_row and grid.width == 1:
        finish_row = rng.next_int(grid.height)
    grid.set(finish_row, grid.width - 1, FINISH)

    log.debug("start row %d, finish row %d", start_row, finish_row)
    return start_row, finish_row
