"""
Shared types for the search and deletion pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ForceMode(str, Enum):
    """Forced deletion switch.

    REQUESTED is accepted from the command line but not implemented: the
    remover logs it and deletes exactly as with OFF.
    """

    OFF = "off"
    REQUESTED = "requested"

    @classmethod
    def from_flag(cls, value: Union[bool, "ForceMode"]) -> "ForceMode":
        if isinstance(value, ForceMode):
            return value
        return cls.REQUESTED if value else cls.OFF


class DeletionStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class DeletionOutcome:
    """Result of deleting one target directory."""

    path: str
    status: DeletionStatus
    reason: Optional[str] = None

    @classmethod
    def ok(cls, path: str) -> "DeletionOutcome":
        return cls(path=path, status=DeletionStatus.SUCCEEDED)

    @classmethod
    def failed(cls, path: str, reason: str) -> "DeletionOutcome":
        return cls(path=path, status=DeletionStatus.FAILED, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.status == DeletionStatus.SUCCEEDED
