"""Command-line entry point."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from dirlist.errors import ListingError
from dirlist.listing import Lister
from dirlist.models import ListingOptions
from dirlist.sources import OsSource

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    p = argparse.ArgumentParser(prog="dirlist", description="list directory contents")
    p.add_argument("files", nargs="*", help="files or directories to list (default: .)")
    p.add_argument("-a", "--all", action="store_true", help="do not ignore entries starting with .")
    p.add_argument("-A", "--almost-all", action="store_true", help="do not list implied . and ..")
    p.add_argument("--author", action="store_true", help="with -l, print the author of each file")
    p.add_argument("-B", "--ignore-backups", action="store_true", help="do not list entries ending with ~")
    p.add_argument("-c", action="store_true", help="use creation time; sort by it unless -l is given without -t")
    p.add_argument("-l", action="store_true", help="use a long listing format")
    p.add_argument("-g", action="store_true", help="like -l, but do not list owner")
    p.add_argument("-G", "--no-group", action="store_true", help="in a long listing, don't print group names")
    p.add_argument("-n", "--numeric-uid-gid", action="store_true", help="like -l, but list numeric user and group IDs")
    p.add_argument("-i", "--inode", action="store_true", help="print the index number of each file")
    p.add_argument("-d", "--directory", action="store_true", help="list directories themselves, not their contents")
    p.add_argument("-t", action="store_true", help="with -c, sort by time in a long listing too")
    p.add_argument("--group-directories-first", action="store_true", help="group directories before files")
    p.add_argument("-r", "--reverse", action="store_true", help="reverse order while sorting")
    p.add_argument("-s", "--size", action="store_true", help="print the allocated size of each file, in blocks")
    p.add_argument("-U", action="store_true", help="do not sort; list entries in directory order")
    p.add_argument("--log-level", choices=sorted(LOG_LEVELS), default="warning", help="diagnostic verbosity (default: warning)")
    return p


def configure_logging(level: str) -> None:
    """Send dirlist log records to stderr at the given level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt="dirlist: %(levelname)s: %(name)s: %(message)s"))
    root = logging.getLogger("dirlist")
    root.handlers[:] = [handler]
    root.setLevel(LOG_LEVELS[level])


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    options = ListingOptions.from_namespace(args)
    logger.debug("Listing %s with %s", args.files or ["."], options)

    try:
        Lister(options, OsSource(), sys.stdout).run(args.files)
    except ListingError as e:
        logger.debug("Listing aborted", exc_info=True)
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
