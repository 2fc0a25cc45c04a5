from typing import Optional


class OptimizerError(Exception):
    """Base class for failures reported by the profit optimizer."""


class InvalidInputError(OptimizerError, ValueError):
    """Horizon is negative or not an integer."""


class ResourceExhaustedError(OptimizerError, MemoryError):
    """Horizon is too large for the state table."""

    def __init__(self, horizon: int, ceiling: Optional[int] = None):
        if ceiling is None:
            message = f"not enough memory for a state table of horizon {horizon}"
        else:
            message = f"horizon {horizon} exceeds the supported maximum of {ceiling}"
        super().__init__(message)
        self.horizon = horizon
        self.ceiling = ceiling
