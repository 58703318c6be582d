"""
Tree search engine for globfind.

This module walks a directory tree, filters entries by type, and tests each
remaining entry's base name against the glob pattern on a worker pool. Entries
the walk cannot read are reported and skipped; only a root that cannot be
reached at all stops the search.
"""

import errno
import os
import stat
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Iterator, List, Optional, Tuple
import logging

from ..models.search_config import SearchConfiguration
from ..models.search_results import MatchSet, SkipReason, WalkError
from .glob_matcher import GlobMatcher


logger = logging.getLogger(__name__)


ACCESS_DENIED_ERRNOS = (errno.EACCES, errno.EPERM)


class TraversalError(Exception):
    """Raised when the walk cannot start at the root path."""
    pass


def is_access_denied(error: BaseException) -> bool:
    """
    Best-effort check whether a filesystem error is a permission failure.

    Only used to word the diagnostic; it never changes how the walk proceeds.

    Args:
        error: Exception reported by the traversal

    Returns:
        True if the error looks like an access/permission denial
    """
    if isinstance(error, PermissionError):
        return True
    return isinstance(error, OSError) and error.errno in ACCESS_DENIED_ERRNOS


class TreeSearchEngine:
    """
    Search engine that walks a directory tree and matches entry names.

    Discovery runs on the calling thread in pre-order (a directory is seen
    before its children). Every entry that passes the type filter is handed
    to a worker that tests the base name and, on a match, appends the path to
    the shared MatchSet. search() returns only after every worker finished.
    """

    def __init__(self, config: SearchConfiguration, max_workers: Optional[int] = None):
        """
        Initialize the search engine.

        Args:
            config: Validated search configuration
            max_workers: Size of the match worker pool (executor default if None)
        """
        self.config = config
        self.max_workers = max_workers
        self._matcher = GlobMatcher(config.pattern, config.case_sensitive)
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'entries_visited': 0,
            'entries_tested': 0,
            'entries_matched': 0,
            'entries_skipped': 0
        }

    def search(self) -> MatchSet:
        """
        Walk the tree and collect every entry whose base name matches.

        Returns:
            MatchSet with the matched paths in no particular order

        Raises:
            TraversalError: If the root path cannot be stat'ed
        """
        root = self.config.root_path
        try:
            root_stat = os.stat(root)
        except OSError as e:
            raise TraversalError(f"cannot access {root!r}: {e.strerror or e}") from e

        root_is_dir = stat.S_ISDIR(root_stat.st_mode)
        matches = MatchSet()
        futures: List[Future] = []

        logger.debug(f"Walking directory tree: {root}")
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for path, is_dir in self._iter_entries(root, root_is_dir):
                self._stats['entries_visited'] += 1

                if not self._passes_type_filter(is_dir):
                    continue

                self._stats['entries_tested'] += 1
                futures.append(executor.submit(self._test_entry, path, matches))

        # Leaving the executor waited for all workers; surface their failures
        for future in futures:
            future.result()

        self._stats['entries_matched'] += len(matches)
        logger.debug(f"Search finished in {root}: {self._stats}")
        return matches

    def _iter_entries(self, root: str, root_is_dir: bool) -> Iterator[Tuple[str, bool]]:
        """
        Yield (path, is_directory) for the root and everything below it.

        Args:
            root: Root path exactly as configured
            root_is_dir: Whether the root is a directory

        Yields:
            One tuple per entry, directories before their contents
        """
        yield root, root_is_dir
        if not root_is_dir:
            return

        for current_dir, subdirs, files in os.walk(root, onerror=self._on_walk_error):
            for name in subdirs:
                path = os.path.join(current_dir, name)
                # os.walk lists links to directories here but never descends
                # into them; they are reported as links, not directories
                yield path, not os.path.islink(path)
            for name in files:
                yield os.path.join(current_dir, name), False

    def _passes_type_filter(self, is_dir: bool) -> bool:
        """Check if an entry of this kind is tested against the pattern."""
        if is_dir:
            return self.config.wants_directories()
        return self.config.wants_files()

    def _test_entry(self, path: str, matches: MatchSet) -> None:
        if self._matcher.matches(path):
            matches.add(path)

    def _on_walk_error(self, error: OSError) -> None:
        """
        Report an entry the walk could not read and let the walk continue.

        Args:
            error: Error raised while listing a directory
        """
        walk_error = self.classify_error(error)
        self._stats['entries_skipped'] += 1
        logger.warning(walk_error.format_message())

    @staticmethod
    def classify_error(error: OSError) -> WalkError:
        """
        Build the WalkError record for a traversal failure.

        Args:
            error: Error raised by the traversal

        Returns:
            WalkError naming the failed path and its classification
        """
        path = error.filename if error.filename is not None else ""
        reason = SkipReason.ACCESS_DENIED if is_access_denied(error) else SkipReason.UNHANDLED
        return WalkError(path=os.fsdecode(path), reason=reason, detail=str(error))

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the searches run by this engine.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


def search(config: SearchConfiguration, max_workers: Optional[int] = None) -> MatchSet:
    """
    Convenience function to run one search.

    Args:
        config: Validated search configuration
        max_workers: Size of the match worker pool

    Returns:
        MatchSet with every matching path

    Raises:
        TraversalError: If the root path cannot be stat'ed
    """
    return TreeSearchEngine(config, max_workers=max_workers).search()
