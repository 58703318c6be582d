"""
Command-line configuration package for globfind.

This package turns the raw argument vector into a validated search
configuration and provides the usage text.
"""

from .parser import (
    ArgumentResolver,
    ClassifiedArguments,
    UsageError,
    format_help,
    resolve
)

__all__ = [
    'ArgumentResolver',
    'ClassifiedArguments',
    'UsageError',
    'format_help',
    'resolve'
]
