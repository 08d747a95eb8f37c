from .confirmation_gate import ConfirmationGate
from .path_matcher import PathMatcher
from .remover import Remover
from .validation import validate_start_directory
from .wipe_service import WipeService

__all__ = [
    "ConfirmationGate",
    "PathMatcher",
    "Remover",
    "WipeService",
    "validate_start_directory",
]
