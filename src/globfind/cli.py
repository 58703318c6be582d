"""
Command-line entry point for globfind.

Resolves the arguments, runs the tree search and prints the matched paths.
Skip diagnostics from the walk are routed through logging to stdout so that
they appear interleaved with the walk, before the final match list.
"""

import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

from .config.parser import DEFAULT_PROGRAM, UsageError, format_help, resolve
from .models.search_results import MatchSet
from .tools.tree_search import TraversalError, search


logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "globfind"
NO_MATCHES_MESSAGE = "No path matches the pattern"
FOUND_HEADER = "Found Paths:"


def configure_logging(stream: Optional[TextIO] = None, level: int = logging.INFO) -> logging.Handler:
    """
    Send the package's log records to the informational output stream.

    Any handler installed by an earlier call is replaced.

    Args:
        stream: Stream to write to (the current sys.stdout if None)
        level: Minimum level emitted

    Returns:
        The installed handler
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


def format_matches(matches: MatchSet) -> List[str]:
    """Get the output lines for a finished search."""
    if not matches:
        return [NO_MATCHES_MESSAGE]
    return [FOUND_HEADER] + matches.paths


def main(argv: Optional[Sequence[str]] = None, program: Optional[str] = None) -> int:
    """
    Run globfind and return the process exit code.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)
        program: Program name for the usage text

    Returns:
        0 on success, 1 on a usage or traversal error
    """
    if argv is None:
        argv = sys.argv[1:]
    if program is None:
        program = os.path.basename(sys.argv[0]) if sys.argv else ""
        if not program or program == "__main__.py":
            program = DEFAULT_PROGRAM

    try:
        config = resolve(argv, program=program)
    except UsageError as e:
        print(f"Error: {e}")
        print(format_help(program))
        return 1

    configure_logging()
    logger.debug(f"Starting search: {config}")

    try:
        matches = search(config)
    except TraversalError as e:
        print(f"Error during file search: {e}")
        return 1

    for line in format_matches(matches):
        print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
