# src/cavegen/mapgen/generator.py
# Full pipeline: endpoints -> walls -> collapsing spots -> intensity.

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import CaveConfig
from ..grid import Grid
from ..render.text import render_field, summary_line
from ..rng import JavaRandom, entropy_seed
from ..tiles import WALL, COLLAPSE
from .collapse import place_collapsing_spots, compute_intensity
from .endpoints import place_endpoints
from .walls import place_walls

log = logging.getLogger(__name__)

@dataclass
class CaveResult:
    config: CaveConfig
    grid: Grid
    seed: int
    start_row: int
    finish_row: int
    wall_lengths: List[int] = field(default_factory=list)

    @property
    def wall_cells(self) -> int:
        return self.grid.count(WALL)

    @property
    def collapse_count(self) -> int:
        return self.grid.count(COLLAPSE)

    def render(self) -> str:
        return render_field(self.grid)

    def summary(self) -> str:
        return summary_line(self)

def resolve_seed(seed: int) -> int:
    return seed if seed != 0 else entropy_seed()

def generate_cave(config: CaveConfig, rng: Optional[JavaRandom] = None) -> CaveResult:
    """
    Build a finished field for config. All draws come from one random
    source, in stage order, so a fixed seed gives the same field every run.
    Raises WallPlacementError or CapacityError; nothing partial is returned.
    """
    seed = config.seed
    if rng is None:
        seed = resolve_seed(config.seed)
        log.debug("seed %d", seed)
        rng = JavaRandom.seeded(seed)

    grid = Grid.empty(config.width, config.height)
    start_row, finish_row = place_endpoints(grid, rng)
    lengths = place_walls(grid, rng, config.num_walls, config.max_tries_per_wall)
    place_collapsing_spots(grid, rng, config.num_collapsing)
    compute_intensity(grid)

    result = CaveResult(
        config=config, grid=grid, seed=seed,
        start_row=start_row, finish_row=finish_row, wall_lengths=lengths,
    )
    log.info("generated %dx%d field: %d wall cells, %d collapsing spots",
             config.width, config.height, result.wall_cells, result.collapse_count)
    return result
