"""
Data models for globfind.

This module contains the core data structures used throughout the system.
"""

from .search_config import SearchConfiguration
from .search_results import MatchSet, SkipReason, WalkError

__all__ = ['SearchConfiguration', 'MatchSet', 'SkipReason', 'WalkError']
