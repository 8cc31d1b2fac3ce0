"""Per-call option schemas for fs-tools operations."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TraversalMode(str, Enum):
    """How far a directory listing descends."""

    recursive = "recursive"
    shallow = "shallow"


class TouchOptions(BaseModel):
    """Options controlling how touch interprets a missing path."""

    force_file: bool = Field(
        default=False, description="Create a file even if the path has no extension"
    )
    force_directory: bool = Field(
        default=False,
        description="Create a directory even if the path has an extension",
    )


class WriteOptions(BaseModel):
    """Options for writing text files."""

    permissions: Optional[int] = Field(
        default=None,
        ge=0,
        le=0o7777,
        description="Permission bits applied to the file after writing",
    )


class TransferPolicy(BaseModel):
    """Error policy for move and copy operations."""

    ignore_errors: bool = Field(
        default=False,
        description="Skip entries that fail instead of aborting the transfer",
    )


class ListOptions(BaseModel):
    """Options for directory listings."""

    mode: TraversalMode = Field(
        default=TraversalMode.recursive, description="Recursive or shallow listing"
    )
    ignore: list[str] = Field(
        default_factory=list, description="Glob patterns of absolute paths to exclude"
    )

    @field_validator("ignore")
    @classmethod
    def _check_patterns(cls, patterns: list[str]) -> list[str]:
        from fs_tools.listing.ignore import validate_pattern

        for pattern in patterns:
            validate_pattern(pattern)
        return patterns
