# src/cavegen/render/text.py
from typing import List

from ..grid import Grid
from ..tiles import glyph_for

def render_rows(grid: Grid) -> List[str]:
    rows = []
    for r in range(grid.height):
        cells = [glyph_for(grid.get(r, c), grid.intensity(r, c)) for c in range(grid.width)]
        rows.append(" ".join(cells))
    return rows

def render_field(grid: Grid) -> str:
    """One line per row, cells separated by single spaces, trailing newline."""
    return "".join(row + "\n" for row in render_rows(grid))

def summary_line(result) -> str:
    cfg = result.config
    return (
        f"Generated field {cfg.width}x{cfg.height} with {cfg.num_walls} walls "
        f"(total wall cells: {result.wall_cells}) and "
        f"{result.collapse_count} collapsing spots."
    )
