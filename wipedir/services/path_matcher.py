"""Find subdirectories whose names match glob-style patterns."""

import fnmatch
import logging
import os
from typing import Iterator, List, Sequence, Union

from wipedir.common.exception import SearchError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class PathMatcher:
    """Pattern-based directory search.

    Patterns are matched against directory names only, using the host's
    fnmatch semantics (case-insensitive on Windows). Matches from each
    pattern are appended in enumeration order; overlapping patterns yield
    duplicate paths.
    """

    def match(
        self, root: PathLike, patterns: Sequence[str], recursive: bool = False
    ) -> List[str]:
        """Resolve every match before returning.

        Raises:
            SearchError: If any directory cannot be enumerated. No partial
                result is returned.
        """
        matches = list(self.iter_matches(root, patterns, recursive))
        logger.info(f"Found {len(matches)} matching directories under {root}")
        return matches

    def iter_matches(
        self, root: PathLike, patterns: Sequence[str], recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield matching directory paths, pattern by pattern.

        A SearchError may be raised after some paths were already yielded;
        callers that act on matches must consume the whole iterator first.
        """
        root_path = os.path.abspath(os.fspath(root))
        for pattern in patterns:
            logger.debug(f"Searching {root_path} for '{pattern}' (recursive={recursive})")
            if recursive:
                yield from self._walk_subtree(root_path, pattern)
            else:
                yield from self._scan_children(root_path, pattern)

    def _scan_children(self, directory: str, pattern: str) -> Iterator[str]:
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if _is_directory(entry) and fnmatch.fnmatch(entry.name, pattern):
                        yield entry.path
        except OSError as e:
            raise SearchError(directory, e) from e

    def _walk_subtree(self, root: str, pattern: str) -> Iterator[str]:
        def _on_error(error: OSError) -> None:
            raise SearchError(error.filename or root, error) from error

        for dirpath, dirnames, _ in os.walk(root, topdown=True, onerror=_on_error):
            for name in dirnames:
                if fnmatch.fnmatch(name, pattern):
                    yield os.path.join(dirpath, name)


def _is_directory(entry: "os.DirEntry[str]") -> bool:
    # Symlinked directories count as matches. An entry whose type cannot be
    # read is skipped rather than failing the search, as os.walk does for
    # its dirnames, so both modes treat such entries alike.
    try:
        return entry.is_dir()
    except OSError:
        return False
