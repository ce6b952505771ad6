"""Ordering policy for listed entries."""

import os

from dirlist.models import Entry, ListingOptions


def name_key(entry: Entry) -> bytes:
    # Byte order, so undecodable names sort the way the OS stores them
    return os.fsencode(entry.name)


def sort_entries(entries: list[Entry], options: ListingOptions) -> list[Entry]:
    """Return entries in display order.

    The primary key is creation time (newest first) or name. ``reverse``
    flips the whole list, then ``group_directories_first`` stably moves
    directories ahead of everything else. ``no_sort`` keeps read order and
    skips every other rule.
    """
    if options.no_sort:
        return list(entries)

    if options.creation_time and (not options.detailed or options.sort_by_time):
        # sorted() keeps ties in input order, reverse=True included
        ordered = sorted(entries, key=lambda e: e.metadata.creation_time, reverse=True)
    else:
        ordered = sorted(entries, key=name_key)

    if options.reverse:
        ordered.reverse()

    if options.group_directories_first:
        ordered.sort(key=lambda e: not e.metadata.is_dir)

    return ordered
