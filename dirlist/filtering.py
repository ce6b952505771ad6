"""Hidden-file and backup-file visibility rules."""

import logging
from pathlib import Path

from dirlist.models import ListingOptions, RawEntry

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Dotfiles are hidden by default."""
    return name.startswith(".")


def is_backup(name: str) -> bool:
    """Editor backups end with a tilde."""
    return name.endswith("~")


def filter_entries(
    entries: list[RawEntry], options: ListingOptions, directory: Path
) -> list[RawEntry]:
    """Drop entries hidden by the active policy.

    With ``show_all`` the synthetic ``.`` and ``..`` entries are appended
    after filtering, so neither rule ever applies to them. They are read
    through symlinks, so ``.`` describes the directory being listed even
    when it was reached through a link.
    """
    visible = []
    for entry in entries:
        if is_hidden(entry.name) and not (options.show_all or options.almost_all):
            continue
        if options.ignore_backups and is_backup(entry.name):
            continue
        visible.append(entry)

    if options.show_all:
        visible.append(RawEntry(name=".", path=directory / ".", follow_symlinks=True))
        visible.append(RawEntry(name="..", path=directory / "..", follow_symlinks=True))

    logger.debug("Kept %d of %d entries in %s", len(visible), len(entries), directory)
    return visible
