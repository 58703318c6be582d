"""
Command-line argument resolver for globfind.

This module turns the raw argument vector into a validated SearchConfiguration.
Flags and positional arguments may appear in any order; recognized flags are
toggles that can be repeated, everything else is collected as a positional
argument. It also owns the usage text shown for --help and on usage errors.
"""

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
import logging

from ..models.search_config import SearchConfiguration


logger = logging.getLogger(__name__)


DEFAULT_PROGRAM = "globfind"


@dataclass
class ClassifiedArguments:
    """
    Raw arguments split into toggles and positional tokens.

    Attributes:
        file_only: -f/--file was given
        dir_only: -d/--dir was given
        case_sensitive: -c/--casesensitive was given
        help_requested: -h/--help was given
        positionals: Non-flag tokens in their original relative order
    """
    file_only: bool = False
    dir_only: bool = False
    case_sensitive: bool = False
    help_requested: bool = False
    positionals: List[str] = field(default_factory=list)


class UsageError(Exception):
    """Raised when the command line is malformed."""
    pass


class ArgumentResolver:
    """
    Resolver from an argument vector to a SearchConfiguration.

    The resolver performs no filesystem checks: whether the root directory
    exists is only discovered once the search starts walking it.
    """

    FLAG_ATTRIBUTES: Dict[str, str] = {
        '-f': 'file_only',
        '--file': 'file_only',
        '-d': 'dir_only',
        '--dir': 'dir_only',
        '-c': 'case_sensitive',
        '--casesensitive': 'case_sensitive',
        '-h': 'help_requested',
        '--help': 'help_requested',
    }

    def __init__(self, program: str = DEFAULT_PROGRAM):
        """
        Initialize the resolver.

        Args:
            program: Program name shown in the usage line
        """
        self.program = program
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def classify(self, raw_args: Sequence[str]) -> ClassifiedArguments:
        """
        Split the arguments into flag toggles and positional tokens.

        Args:
            raw_args: Argument vector without the program name

        Returns:
            ClassifiedArguments with every recognized flag applied
        """
        classified = ClassifiedArguments()
        for arg in raw_args:
            attribute = self.FLAG_ATTRIBUTES.get(arg)
            if attribute is None:
                classified.positionals.append(arg)
            else:
                setattr(classified, attribute, True)
        return classified

    def resolve(self, raw_args: Sequence[str]) -> SearchConfiguration:
        """
        Resolve the arguments into a search configuration.

        A help request prints the usage text and exits the process with
        status 0 before any other validation takes place.

        Args:
            raw_args: Argument vector without the program name

        Returns:
            The validated SearchConfiguration

        Raises:
            UsageError: If the positional count is wrong or both type
                filters were requested
        """
        classified = self.classify(raw_args)

        if classified.help_requested:
            print(self.format_help())
            sys.exit(0)

        if len(classified.positionals) != 2:
            raise UsageError("invalid number of positional arguments")

        if classified.file_only and classified.dir_only:
            raise UsageError("file-only and dir-only are mutually exclusive")

        root_path, pattern = classified.positionals
        config = SearchConfiguration(
            root_path=root_path,
            pattern=pattern,
            file_only=classified.file_only,
            dir_only=classified.dir_only,
            case_sensitive=classified.case_sensitive,
        )
        self.logger.debug(f"Resolved configuration: {config}")
        return config

    def format_help(self) -> str:
        """Get the usage text for this program."""
        return "\n".join([
            f"Usage: {self.program} <directory> <pattern> [OPTIONS]",
            "Options:",
            "  -f, --file             Only return files",
            "  -d, --dir              Only return directories",
            "  -c, --casesensitive    Make the search case-sensitive",
            "  -h, --help             Display this help message",
        ])


def resolve(raw_args: Sequence[str], program: Optional[str] = None) -> SearchConfiguration:
    """
    Convenience function to resolve command-line arguments.

    Args:
        raw_args: Argument vector without the program name
        program: Program name shown in the usage text

    Returns:
        The validated SearchConfiguration
    """
    return ArgumentResolver(program or DEFAULT_PROGRAM).resolve(raw_args)


def format_help(program: Optional[str] = None) -> str:
    """
    Convenience function to build the usage text.

    Args:
        program: Program name shown in the usage line

    Returns:
        Usage text without a trailing newline
    """
    return ArgumentResolver(program or DEFAULT_PROGRAM).format_help()
