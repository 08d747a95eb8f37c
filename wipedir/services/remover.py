"""Recursive deletion of confirmed directories."""

import logging
import shutil
from typing import List, Optional, Sequence, Union

from wipedir.common.constants import FORCE_NOT_IMPLEMENTED_MESSAGE
from wipedir.common.exception import DeletionError
from wipedir.common.utils.output_sink import OutputSink, get_output_sink
from wipedir.models.types import DeletionOutcome, ForceMode

logger = logging.getLogger(__name__)


class Remover:
    """Deletes a batch of directories, one attempt per target.

    A failure on one target is reported and recorded, then the batch moves
    on. Only failures are printed; successes are logged.
    """

    def __init__(self, sink: Optional[OutputSink] = None):
        self.sink = sink or get_output_sink()

    def remove(
        self,
        paths: Sequence[str],
        force: Union[ForceMode, bool] = ForceMode.OFF,
    ) -> List[DeletionOutcome]:
        """Delete every path with all of its contents.

        Args:
            paths: Directories to delete, in order.
            force: Reserved. ForceMode.REQUESTED is logged and otherwise
                ignored.

        Returns:
            One outcome per input path, in input order.
        """
        if ForceMode.from_flag(force) is ForceMode.REQUESTED:
            logger.warning(FORCE_NOT_IMPLEMENTED_MESSAGE)

        outcomes = [self._remove_one(path) for path in paths]

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        logger.info(f"Removed {len(outcomes) - failed} of {len(outcomes)} directories")
        return outcomes

    def _remove_one(self, path: str) -> DeletionOutcome:
        try:
            shutil.rmtree(path)
        except OSError as e:
            error = DeletionError(path, e)
            logger.error(f"❌ {error}")
            self.sink.error(str(error))
            return DeletionOutcome.failed(path, str(e))

        logger.info(f"✅ Deleted directory: {path}")
        return DeletionOutcome.ok(path)
