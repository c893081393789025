# Cell kinds and their display glyphs.

EMPTY = 0
WALL = 1
COLLAPSE = 2
START = 3
FINISH = 4

GLYPHS = {
    EMPTY: ".",
    WALL: "W",
    COLLAPSE: "C",
    START: ">",
    FINISH: "<",
}

MAX_INTENSITY = 9

def is_marker(kind: int) -> bool:
    # Markers always draw their own glyph; everything else shows intensity.
    return kind in (WALL, COLLAPSE, START, FINISH)

def blocks_intensity(kind: int) -> bool:
    return kind in (WALL, COLLAPSE)

def glyph_for(kind: int, intensity: int) -> str:
    if is_marker(kind):
        return GLYPHS[kind]
    if intensity > 0:
        return str(intensity)
    return GLYPHS[EMPTY]
