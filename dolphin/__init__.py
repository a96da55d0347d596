"""
Dolphin: typed async CRUD repositories over SQLAlchemy.

Exports the repository classes, the operation result model and the
paginator so callers can import them from the package root.
"""

from dolphin.common.operation_result import OperationResult
from dolphin.common.paginator import Paginator
from dolphin.core.exceptions import InvalidKeyTypeError, RepositoryError
from dolphin.repositories.minimal import MinimalRepository
from dolphin.repositories.repository import Repository

__all__ = [
    "OperationResult",
    "Paginator",
    "InvalidKeyTypeError",
    "RepositoryError",
    "MinimalRepository",
    "Repository",
]
