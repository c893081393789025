# src/cavegen/mapgen/walls.py
# Straight wall segments placed by bounded random retry.

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..config import MIN_WALL_LEN, MAX_WALL_LEN, MAX_TRIES_PER_WALL
from ..errors import WallPlacementError
from ..grid import Grid
from ..rng import JavaRandom
from ..tiles import EMPTY, WALL

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class WallSegment:
    row: int
    col: int
    length: int
    horizontal: bool

    def span(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.length):
            if self.horizontal:
                yield (self.row, self.col + i)
            else:
                yield (self.row + i, self.col)

def sample_segment(grid: Grid, rng: JavaRandom) -> Optional[WallSegment]:
    """
    One placement attempt's worth of draws: orientation, length, anchor.
    Returns None when the length cannot fit along that axis (the attempt
    still counts).
    """
    horizontal = rng.next_boolean()
    length = rng.next_int(MAX_WALL_LEN - MIN_WALL_LEN + 1) + MIN_WALL_LEN

    if horizontal:
        r = rng.next_int(grid.height)
        max_c = grid.width - length
        if max_c < 0:
            return None
        c = rng.next_int(max_c + 1)
    else:
        c = rng.next_int(grid.width)
        max_r = grid.height - length
        if max_r < 0:
            return None
        r = rng.next_int(max_r + 1)
    return WallSegment(row=r, col=c, length=length, horizontal=horizontal)

def can_place(grid: Grid, seg: WallSegment) -> bool:
    # Any occupied cell (wall, endpoint, collapse) rejects the segment.
    return all(grid.get(r, c) == EMPTY for (r, c) in seg.span())

def apply_segment(grid: Grid, seg: WallSegment) -> None:
    for (r, c) in seg.span():
        grid.set(r, c, WALL)

def place_wall(grid: Grid, rng: JavaRandom, index: int,
               max_tries: int = MAX_TRIES_PER_WALL) -> WallSegment:
    """Place one segment or raise WallPlacementError (index is 1-based)."""
    for attempt in range(1, max_tries + 1):
        seg = sample_segment(grid, rng)
        if seg is None or not can_place(grid, seg):
            continue
        apply_segment(grid, seg)
        log.debug("wall #%d: %s len %d at (%d,%d) after %d tries",
                  index, "h" if seg.horizontal else "v",
                  seg.length, seg.row, seg.col, attempt)
        return seg
    raise WallPlacementError(index, max_tries)

def place_walls(grid: Grid, rng: JavaRandom, num_walls: int,
                max_tries: int = MAX_TRIES_PER_WALL) -> List[int]:
    """
    Place num_walls segments in order. Returns the placed lengths; the
    segments themselves are not kept.
    """
    lengths = []
    for w in range(num_walls):
        seg = place_wall(grid, rng, w + 1, max_tries)
        lengths.append(seg.length)
    return lengths
