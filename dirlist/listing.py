"""Drive filtering, sorting, projection and rendering for a set of targets."""

import logging
import os
from pathlib import Path
from typing import Sequence, TextIO

from dirlist.errors import AccessError
from dirlist.filtering import filter_entries
from dirlist.models import Entry, Grid, ListingOptions, RawEntry
from dirlist.projector import display_text, project_row, size_blocks
from dirlist.renderer import render
from dirlist.sorting import sort_entries
from dirlist.sources import EntrySource

logger = logging.getLogger(__name__)


def display_name(target: str | Path) -> str:
    """Base name of a target, or the target itself when it has none (``.``, ``/``)."""
    return Path(target).name or str(target)


class Lister:
    """Lists directories and explicit paths to a text stream.

    Each directory block is built completely before it is written, so a
    failing lookup never leaves a half-printed listing behind.
    """

    def __init__(self, options: ListingOptions, source: EntrySource, out: TextIO):
        self.options = options
        self.source = source
        self.out = out

    def run(self, targets: Sequence[str] = ()) -> None:
        if not targets:
            self.out.write(self.list_directory(Path(".")))
            return

        for target in targets:
            if not target:
                # Path("") is the current directory, but "" names no file
                raise AccessError(target, "No such file or directory")

        if self.options.directory:
            self.out.write(self.list_paths(targets))
            return

        dirs, files = [], []
        for target in targets:
            (dirs if self.source.is_directory(Path(target)) else files).append(target)
        logger.debug("Targets split into %d files and %d directories", len(files), len(dirs))

        self.out.write(self.list_paths(files))
        if files and dirs:
            self.out.write("\n")

        dirs.sort(key=os.fsencode)
        if self.options.reverse:
            dirs.reverse()

        if len(dirs) == 1 and not files:
            self.out.write(self.list_directory(Path(dirs[0])))
            return

        for i, target in enumerate(dirs):
            listing = self.list_directory(Path(target))
            self.out.write(f"{display_text(display_name(target))}:\n")
            self.out.write(listing)
            if i != len(dirs) - 1:
                self.out.write("\n")

    def list_directory(self, directory: Path) -> str:
        """Render the contents of one directory, with a total line in detailed mode."""
        raw = [RawEntry(name=p.name, path=p) for p in self.source.list_directory(directory)]
        entries = self._resolve(filter_entries(raw, self.options, directory))
        entries = sort_entries(entries, self.options)

        text = ""
        if self.options.detailed:
            total = sum(size_blocks(entry.metadata) for entry in entries)
            text += f"total {total}\n"
        return text + self._render(entries)

    def list_paths(self, targets: Sequence[str]) -> str:
        """Render targets as entries of their own, without expanding directories."""
        raw = [RawEntry(name=display_name(t), path=Path(t)) for t in targets]
        entries = sort_entries(self._resolve(raw), self.options)
        return self._render(entries)

    def _resolve(self, raw: list[RawEntry]) -> list[Entry]:
        # The only metadata read for each entry in this pass
        return [
            Entry(
                name=r.name,
                path=r.path,
                follow_symlinks=r.follow_symlinks,
                metadata=self.source.metadata(r.path, follow_symlinks=r.follow_symlinks),
            )
            for r in raw
        ]

    def _render(self, entries: list[Entry]) -> str:
        grid = Grid(rows=[project_row(entry, self.options, self.source) for entry in entries])
        return render(grid, self.options.detailed)
