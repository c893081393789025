import os
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, TypeVar

# 48-bit LCG constants (same core as java.util.Random)
MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
MASK = (1 << 48) - 1

T = TypeVar("T")

def scramble(seed: int) -> int:
    # Works for negative seeds too: Python's & keeps the low 48 two's-complement bits.
    return (seed ^ MULTIPLIER) & MASK

def lcg_next(state: int) -> int:
    return (state * MULTIPLIER + INCREMENT) & MASK

def entropy_seed() -> int:
    """Fresh non-zero seed for runs that did not ask for one."""
    while True:
        s = int.from_bytes(os.urandom(6), "big")
        if s:
            return s

def s32(v: int) -> int:
    v &= 0xFFFFFFFF
    return v - 0x100000000 if (v & 0x80000000) else v

@dataclass
class JavaRandom:
    state: int

    @classmethod
    def seeded(cls, seed: int) -> "JavaRandom":
        return cls(state=scramble(seed))

    def next_bits(self, bits: int) -> int:
        self.state = lcg_next(self.state)
        return self.state >> (48 - bits)

    def next_int(self, bound: Optional[int] = None) -> int:
        """
        Without a bound: a signed 32-bit value.
        With a bound: uniform in [0, bound), using the same rejection rule as
        the JDK so the draw sequence matches it exactly.
        """
        if bound is None:
            return s32(self.next_bits(32))
        if bound <= 0:
            raise ValueError("bound must be positive")
        r = self.next_bits(31)
        m = bound - 1
        if (bound & m) == 0:
            # power of two: take the high bits
            return (bound * r) >> 31
        u = r
        r = u % bound
        # reject the tail that would overflow a signed 32-bit int
        while u - r + m >= 0x80000000:
            u = self.next_bits(31)
            r = u % bound
        return r

    def next_boolean(self) -> bool:
        return self.next_bits(1) != 0

    def shuffle(self, items: MutableSequence[T]) -> None:
        for i in range(len(items), 1, -1):
            j = self.next_int(i)
            items[i - 1], items[j] = items[j], items[i - 1]

    def sample(self, items: List[T], k: int) -> List[T]:
        # Shuffle a copy and take the head: sampling without replacement.
        pool = list(items)
        self.shuffle(pool)
        return pool[:k]
