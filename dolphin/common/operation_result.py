"""
Outcome of a mutating repository call.
"""

from enum import Enum


class OperationResult(str, Enum):
    """
    Result of save, update or delete.

    SUCCESS means the store reported at least one affected record for the
    commit. FAILED covers zero affected records, a missing target record and
    any fault raised by the store; callers treat it as "nothing persisted".
    """

    SUCCESS = "success"
    FAILED = "failed"

    @classmethod
    def from_affected(cls, affected: int) -> "OperationResult":
        """Map an affected-record count to a result."""
        return cls.SUCCESS if affected > 0 else cls.FAILED

    @property
    def succeeded(self) -> bool:
        return self is OperationResult.SUCCESS
