# Error taxonomy for cave generation.

class CaveError(Exception):
    pass

class ConfigError(CaveError, ValueError):
    """Bad parameters; raised before any generation work starts."""

class GenerationError(CaveError, RuntimeError):
    """A stage could not finish. Generation is aborted as a whole."""

class WallPlacementError(GenerationError):
    def __init__(self, index: int, attempts: int):
        self.index = index          # 1-based segment number
        self.attempts = attempts
        super().__init__(
            f"Failed to place wall #{index} after many attempts. "
            "Grid may be too dense for requested walls."
        )

class CapacityError(GenerationError):
    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Not enough empty spaces ({available}) to place "
            f"{requested} collapsing spots. Aborting."
        )
