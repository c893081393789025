# Fields for fixed seeds; these match the original program's output byte for byte.
from cavegen.config import CaveConfig
from cavegen.mapgen.generator import generate_cave

GOLDEN_5x3 = (
    ". . . . <\n"
    ". 1 1 1 .\n"
    "> 1 C 1 .\n"
)

GOLDEN_8x5 = (
    ". W W W W W 2 C\n"
    "> . . . . 1 C 2\n"
    "W W W W W 2 2 1\n"
    "1 C 1 W W C 1 .\n"
    "1 1 1 . 1 1 1 <\n"
)

def test_small_field_seed_42():
    res = generate_cave(CaveConfig(5, 3, 0, 1, seed=42))
    assert res.render() == GOLDEN_5x3
    assert (res.start_row, res.finish_row) == (2, 0)
    assert res.summary() == (
        "Generated field 5x3 with 0 walls (total wall cells: 0) and 1 collapsing spots."
    )

def test_field_with_walls_seed_7():
    res = generate_cave(CaveConfig(8, 5, 3, 4, seed=7))
    assert res.render() == GOLDEN_8x5
    assert sorted(res.wall_lengths) == [2, 5, 5]
    assert res.wall_cells == 12
    assert res.summary() == (
        "Generated field 8x5 with 3 walls (total wall cells: 12) and 4 collapsing spots."
    )

def test_same_seed_same_bytes():
    cfg = CaveConfig(20, 10, 8, 15, seed=12345)
    assert generate_cave(cfg).render() == generate_cave(cfg).render()
