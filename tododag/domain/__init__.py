from .dag import (
    APPLIED,
    ConstraintGraph,
    InvariantViolationError,
    MutationResult,
    Rejection,
)

__all__ = [
    "APPLIED",
    "ConstraintGraph",
    "InvariantViolationError",
    "MutationResult",
    "Rejection",
]
