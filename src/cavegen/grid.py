from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import EMPTY

RC = Tuple[int, int]

@dataclass
class Grid:
    """
    Row-major cell kinds plus a parallel intensity buffer.
    Coordinates are (row, col) with the origin at the top-left.
    """
    width: int
    height: int
    buf: List[int]
    hollow: List[int]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        n = width * height
        return cls(width=width, height=height, buf=[EMPTY] * n, hollow=[0] * n)

    def idx(self, r: int, c: int) -> int:
        if not (0 <= r < self.height and 0 <= c < self.width):
            raise IndexError(f"cell ({r},{c}) outside {self.width}x{self.height}")
        return r * self.width + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def get(self, r: int, c: int) -> int:
        return self.buf[self.idx(r, c)]

    def set(self, r: int, c: int, v: int) -> None:
        self.buf[self.idx(r, c)] = v

    def intensity(self, r: int, c: int) -> int:
        return self.hollow[self.idx(r, c)]

    def set_intensity(self, r: int, c: int, v: int) -> None:
        self.hollow[self.idx(r, c)] = v

    def reset(self) -> None:
        n = self.width * self.height
        self.buf[:] = [EMPTY] * n
        self.hollow[:] = [0] * n

    def reset_intensity(self) -> None:
        self.hollow[:] = [0] * (self.width * self.height)

    def cells(self) -> Iterator[RC]:
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def cells_of(self, kind: int) -> List[RC]:
        return [(r, c) for (r, c) in self.cells() if self.get(r, c) == kind]

    def count(self, kind: int) -> int:
        return self.buf.count(kind)

    def as_matrix(self) -> List[List[int]]:
        return [self.buf[r * self.width:(r + 1) * self.width] for r in range(self.height)]
