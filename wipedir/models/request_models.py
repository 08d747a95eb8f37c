"""
Request model for a single wipedir invocation.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from wipedir.common.constants import MAX_PATTERNS, MIN_PATTERNS
from wipedir.models.types import ForceMode


class SearchRequest(BaseModel):
    """Search and delete request built from command line input.

    The start directory is checked by ``validate_start_directory`` before the
    request is constructed; this model enforces the pattern limits.
    """

    model_config = ConfigDict(frozen=True)

    root_path: Path = Field(..., description="Directory to search under")
    patterns: List[str] = Field(
        ...,
        min_length=MIN_PATTERNS,
        max_length=MAX_PATTERNS,
        description="Directory name patterns, processed in the given order",
    )
    recursive: bool = Field(
        default=False, description="Search the whole subtree instead of immediate children"
    )
    force: ForceMode = Field(
        default=ForceMode.OFF, description="Reserved, forced deletion is not implemented"
    )
