"""
Search tools for globfind.

This module contains the directory tree search engine and the glob matcher
it uses to test entry names.
"""

from .glob_matcher import GlobMatcher, base_name, is_malformed_pattern, match_base_name
from .tree_search import TraversalError, TreeSearchEngine, is_access_denied, search

__all__ = [
    'GlobMatcher',
    'base_name',
    'is_malformed_pattern',
    'match_base_name',
    'TraversalError',
    'TreeSearchEngine',
    'is_access_denied',
    'search'
]
