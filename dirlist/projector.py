"""Project entry metadata into display fields."""

import stat
from datetime import datetime

from dirlist.models import DisplayField, Entry, ListingOptions, Metadata
from dirlist.sources import EntrySource

_TYPE_CHARS = (
    (stat.S_ISDIR, "d"),
    (stat.S_ISLNK, "l"),
    (stat.S_ISCHR, "c"),
    (stat.S_ISBLK, "b"),
    (stat.S_ISFIFO, "p"),
    (stat.S_ISSOCK, "s"),
)

# (read, write, execute, special bit, special char when executable)
_PERMISSION_TRIADS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s"),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s"),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t"),
)


def format_permissions(mode: int) -> str:
    """Convert numeric file mode to an ``ls -l`` style permission string."""
    type_char = "-"
    for test, char in _TYPE_CHARS:
        if test(mode):
            type_char = char
            break

    perms = type_char
    for read, write, execute, special, special_char in _PERMISSION_TRIADS:
        perms += "r" if mode & read else "-"
        perms += "w" if mode & write else "-"
        if mode & special:
            perms += special_char if mode & execute else special_char.upper()
        else:
            perms += "x" if mode & execute else "-"
    return perms


def format_date(timestamp: float) -> str:
    """Month abbreviation and space-padded day, e.g. ``Jan  5``."""
    dt = datetime.fromtimestamp(timestamp)
    return f"{dt:%b} {dt.day:>2}"


def format_time(timestamp: float) -> str:
    """24-hour ``HH:MM`` in local time."""
    return datetime.fromtimestamp(timestamp).strftime("%H:%M")


def display_text(name: str) -> str:
    """Replace undecodable filename bytes with U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def size_blocks(metadata: Metadata) -> int:
    """Blocks in units of the preferred block size; symlinks are charged nothing."""
    if metadata.is_symlink:
        return 0
    factor = max(metadata.block_size // 512, 1)
    return metadata.blocks // factor


def project_row(entry: Entry, options: ListingOptions, source: EntrySource) -> list[DisplayField]:
    """Build one row in canonical field order.

    inode, blocks, mode, nlink, owner, group, author, size, creation date,
    primary time, name. Lookup failures from ``source`` propagate.
    """
    meta = entry.metadata
    row = []

    if options.show_inode:
        row.append(DisplayField(text=str(meta.inode), align="right"))

    if options.show_size:
        row.append(DisplayField(text=str(size_blocks(meta)), align="right"))

    if options.detailed:
        row.append(DisplayField(text=format_permissions(meta.mode), align="left"))
        row.append(DisplayField(text=str(meta.nlink), align="right"))

        if options.numeric_ids:
            owner = DisplayField(text=str(meta.uid), align="right")
            group = DisplayField(text=str(meta.gid), align="right")
        else:
            owner = DisplayField(text=display_text(source.user_name(meta.uid)), align="left")
            group = DisplayField(text=display_text(source.group_name(meta.gid)), align="left")

        if not options.omit_owner:
            row.append(owner)
        if not options.omit_group:
            row.append(group)
        if options.show_author:
            row.append(owner)

        row.append(DisplayField(text=str(meta.size), align="right"))
        row.append(DisplayField(text=format_date(meta.creation_time), align="left"))
        primary = meta.creation_time if options.creation_time else meta.mtime
        row.append(DisplayField(text=format_time(primary), align="left"))

    name = display_text(entry.name)
    if options.detailed and meta.is_symlink:
        name += " -> " + display_text(source.read_link(entry.path))
    row.append(DisplayField(text=name, align="none"))

    return row
