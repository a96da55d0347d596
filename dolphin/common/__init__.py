"""
Shared value types: operation results and pagination.
"""

from dolphin.common.operation_result import OperationResult
from dolphin.common.paginator import Paginator

__all__ = ["OperationResult", "Paginator"]
