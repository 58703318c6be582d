"""
Search configuration data model for globfind.

This module defines the validated, immutable configuration handed from the
argument resolver to the tree search engine.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchConfiguration(BaseModel):
    """
    Represents one search request with all of its options.

    Created once from the command line and never modified afterwards. The
    model is frozen so that the match workers can share it without locking.

    Attributes:
        root_path: Directory the walk starts from (kept exactly as given)
        pattern: Shell-style glob pattern tested against base names
        file_only: Only test entries that are not directories
        dir_only: Only test entries that are directories
        case_sensitive: Compare base names and pattern without case folding
    """

    model_config = ConfigDict(frozen=True)

    root_path: str = Field(..., description="Root directory of the walk")
    pattern: str = Field(..., description="Glob pattern matched against base names")
    file_only: bool = Field(False, description="Only match files")
    dir_only: bool = Field(False, description="Only match directories")
    case_sensitive: bool = Field(False, description="Case-sensitive matching")

    @model_validator(mode='after')
    def validate_type_filters(self):
        """File-only and dir-only cannot both be requested."""
        if self.file_only and self.dir_only:
            raise ValueError("file-only and dir-only are mutually exclusive")
        return self

    def wants_directories(self) -> bool:
        """Check if directory entries are tested against the pattern."""
        return not self.file_only

    def wants_files(self) -> bool:
        """Check if non-directory entries are tested against the pattern."""
        return not self.dir_only

    def __str__(self) -> str:
        """String representation of the configuration."""
        parts = [f"Root: {self.root_path}", f"Pattern: '{self.pattern}'"]

        if self.file_only:
            parts.append("Files only")
        elif self.dir_only:
            parts.append("Directories only")

        parts.append("Case-sensitive" if self.case_sensitive else "Case-insensitive")

        return " | ".join(parts)
