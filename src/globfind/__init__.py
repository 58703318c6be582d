"""
globfind - Core Package

Recursively searches a directory tree for files and directories whose
base name matches a shell-style glob pattern.
"""

__version__ = "0.1.0"
__author__ = "globfind Team"
