from dataclasses import dataclass

from .errors import ConfigError

MIN_SIDE = 3
MIN_WALL_LEN, MAX_WALL_LEN = 1, 5
MAX_TRIES_PER_WALL = 500  # keeps dense requests from looping forever

def _require_int(name: str, v) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigError(f"{name} must be an integer, got {v!r}")

@dataclass(frozen=True)
class CaveConfig:
    width: int
    height: int
    num_walls: int = 0
    num_collapsing: int = 0
    seed: int = 0                 # 0 = draw one from the OS
    max_tries_per_wall: int = MAX_TRIES_PER_WALL

    def __post_init__(self):
        for name in ("width", "height", "num_walls", "num_collapsing",
                     "seed", "max_tries_per_wall"):
            _require_int(name, getattr(self, name))
        if self.width < MIN_SIDE or self.height < MIN_SIDE:
            raise ConfigError(f"Width and height must be >= {MIN_SIDE}")
        if self.num_walls < 0:
            raise ConfigError("num_walls must be >= 0")
        if self.num_collapsing < 0:
            raise ConfigError("num_collapsing must be >= 0")
        if self.max_tries_per_wall < 1:
            raise ConfigError("max_tries_per_wall must be >= 1")
