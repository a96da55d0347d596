"""
Exception hierarchy for contract violations.

Ordinary persistence failures are reported through OperationResult and
never raised; these exceptions signal that the caller misused the API.
"""

from typing import Any


class RepositoryError(Exception):
    """Base exception for repository contract violations"""
    pass


class InvalidKeyTypeError(RepositoryError, TypeError):
    """
    Raised when a lookup key is neither an int nor a str.

    Attributes:
        key: The rejected key value
    """

    def __init__(self, key: Any):
        self.key = key
        super().__init__(
            f"Unsupported key type: {type(key).__name__} "
            f"(expected int or str)"
        )
