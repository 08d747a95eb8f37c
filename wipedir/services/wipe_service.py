"""Search, confirm, delete."""

import logging
from typing import List, Optional

from wipedir.common.config import config
from wipedir.common.constants import NO_MATCHES_MESSAGE
from wipedir.common.utils.output_sink import OutputSink, get_output_sink
from wipedir.models.request_models import SearchRequest
from wipedir.models.types import DeletionOutcome
from wipedir.services.confirmation_gate import ConfirmationGate
from wipedir.services.path_matcher import PathMatcher
from wipedir.services.remover import Remover

logger = logging.getLogger(__name__)


class WipeService:
    """Runs the search and delete pipeline for one request.

    The full match set is resolved and shown at the confirmation gate before
    the first deletion starts.
    """

    def __init__(
        self,
        matcher: Optional[PathMatcher] = None,
        gate: Optional[ConfirmationGate] = None,
        remover: Optional[Remover] = None,
        sink: Optional[OutputSink] = None,
        confirm_empty_batch: Optional[bool] = None,
    ):
        self.sink = sink or get_output_sink()
        self.matcher = matcher or PathMatcher()
        self.gate = gate or ConfirmationGate(sink=self.sink)
        self.remover = remover or Remover(sink=self.sink)
        if confirm_empty_batch is None:
            confirm_empty_batch = config.CONFIRM_EMPTY_BATCH
        self.confirm_empty_batch = confirm_empty_batch

    def run(self, request: SearchRequest) -> List[DeletionOutcome]:
        """Find, confirm and delete the directories matching the request.

        Raises:
            SearchError: If the search fails. Nothing is deleted.
        """
        paths = self.matcher.match(request.root_path, request.patterns, request.recursive)

        if not paths and not self.confirm_empty_batch:
            self.sink.warning(NO_MATCHES_MESSAGE)
            return []

        self.gate.confirm(paths)
        return self.remover.remove(paths, request.force)
