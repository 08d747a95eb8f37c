"""
Models for wipedir requests and results.
"""

from .request_models import SearchRequest
from .types import DeletionOutcome, DeletionStatus, ForceMode

__all__ = [
    "SearchRequest",
    "DeletionOutcome",
    "DeletionStatus",
    "ForceMode",
]
