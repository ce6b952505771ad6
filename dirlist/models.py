"""Pydantic models for listing data structures."""

import os
import stat
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Align = Literal["left", "right", "none"]


class ListingOptions(BaseModel):
    """Every on/off behavior of a listing call."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"detailed": True, "show_all": True, "group_directories_first": True},
                {"no_sort": True, "show_inode": True},
            ]
        },
    )

    # Entry Filter
    show_all: bool = Field(False, description="Show dotfiles and the synthetic '.' and '..'")
    almost_all: bool = Field(False, description="Show dotfiles but not '.' and '..'")
    ignore_backups: bool = Field(False, description="Hide names ending with '~'")

    # Entry Sorter
    no_sort: bool = Field(False, description="Keep directory read order")
    creation_time: bool = Field(
        False, description="Sort by creation time and show it as the primary time"
    )
    sort_by_time: bool = Field(False, description="Sort by time even in detailed mode")
    reverse: bool = Field(False, description="Reverse the primary order")
    group_directories_first: bool = Field(False, description="List directories before files")

    # Metadata Projector
    detailed: bool = Field(False, description="Multi-column long listing")
    show_inode: bool = Field(False, description="Prefix each entry with its inode")
    show_size: bool = Field(False, description="Prefix each entry with its block usage")
    numeric_ids: bool = Field(False, description="Show uid/gid instead of names")
    omit_owner: bool = Field(False, description="Drop the owner column")
    omit_group: bool = Field(False, description="Drop the group column")
    show_author: bool = Field(False, description="Add an author column")

    # Listing Orchestrator
    directory: bool = Field(False, description="List targets themselves, not their contents")

    @classmethod
    def from_namespace(cls, args) -> "ListingOptions":
        """Build options from parsed command-line arguments."""
        return cls(
            show_all=args.all,
            almost_all=args.almost_all,
            ignore_backups=args.ignore_backups,
            no_sort=args.U,
            creation_time=args.c,
            sort_by_time=args.t,
            reverse=args.reverse,
            group_directories_first=args.group_directories_first,
            detailed=args.l or args.numeric_uid_gid or args.g,
            show_inode=args.inode,
            show_size=args.size,
            numeric_ids=args.numeric_uid_gid,
            omit_owner=args.g,
            omit_group=args.no_group,
            show_author=args.author,
            directory=args.directory,
        )


class Metadata(BaseModel):
    """Snapshot of one entry's stat data."""

    model_config = ConfigDict(frozen=True)

    inode: int = Field(..., description="Inode number")
    nlink: int = Field(..., description="Hard link count")
    uid: int = Field(..., description="Owner user id")
    gid: int = Field(..., description="Owner group id")
    size: int = Field(..., description="Size in bytes")
    blocks: int = Field(0, description="Allocated 512-byte blocks")
    block_size: int = Field(512, description="Preferred I/O block size")
    mode: int = Field(..., description="Raw st_mode, type and permission bits")
    mtime: float = Field(..., description="Modification time (Unix timestamp)")
    creation_time: float = Field(..., description="Creation time (Unix timestamp)")
    is_symlink: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Metadata":
        """Snapshot the fields of an ``os.stat_result``."""
        return cls(
            inode=st.st_ino,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            blocks=getattr(st, "st_blocks", 0),
            block_size=getattr(st, "st_blksize", 512),
            mode=st.st_mode,
            mtime=st.st_mtime,
            # st_birthtime is missing on most Linux builds
            creation_time=getattr(st, "st_birthtime", st.st_ctime),
            is_symlink=stat.S_ISLNK(st.st_mode),
            is_dir=stat.S_ISDIR(st.st_mode),
        )


class RawEntry(BaseModel):
    """A name plus the path it was found at."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Base name as shown in the listing")
    path: Path = Field(..., description="Path used for metadata and symlink reads")
    follow_symlinks: bool = Field(
        False, description="Stat through a symlink, for the synthetic . and .. entries"
    )


class Entry(RawEntry):
    """A RawEntry with the metadata fetched for it in this listing pass."""

    metadata: Metadata


class DisplayField(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    align: Align = "none"


class ColumnSpec(BaseModel):
    width: int
    align: Align


class Grid(BaseModel):
    """Rows of display fields rendered together in one listing call."""

    rows: list[list[DisplayField]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_uniform_columns(self) -> "Grid":
        if self.rows:
            widths = {len(row) for row in self.rows}
            if len(widths) != 1:
                raise ValueError(f"ragged grid, column counts {sorted(widths)}")
        return self

    def column_specs(self) -> list[ColumnSpec]:
        """Width is the longest text per column, alignment comes from the first row."""
        if not self.rows:
            return []
        return [
            ColumnSpec(
                width=max(len(row[i].text) for row in self.rows),
                align=field.align,
            )
            for i, field in enumerate(self.rows[0])
        ]
