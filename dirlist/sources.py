"""Filesystem collaborators the listing pipeline reads from."""

import grp
import logging
import os
import pwd
from pathlib import Path
from typing import Protocol

from dirlist.errors import AccessError, IdentityError
from dirlist.models import Metadata

logger = logging.getLogger(__name__)


class EntrySource(Protocol):
    """Directory reader, metadata source, identity and symlink resolver."""

    def list_directory(self, path: Path) -> list[Path]: ...

    def metadata(self, path: Path, follow_symlinks: bool = False) -> Metadata: ...

    def is_directory(self, path: Path) -> bool: ...

    def user_name(self, uid: int) -> str: ...

    def group_name(self, gid: int) -> str: ...

    def read_link(self, path: Path) -> str: ...


class OsSource:
    """EntrySource backed by the local filesystem and account databases."""

    def list_directory(self, path: Path) -> list[Path]:
        """Return child paths in the order the OS yields them."""
        try:
            children = list(Path(path).iterdir())
        except OSError as e:
            logger.debug("Failed to read directory %s", path, exc_info=True)
            raise AccessError(path, e.strerror or str(e)) from e
        logger.debug("Read %d entries from %s", len(children), path)
        return children

    def metadata(self, path: Path, follow_symlinks: bool = False) -> Metadata:
        try:
            st = os.stat(path, follow_symlinks=follow_symlinks)
        except OSError as e:
            logger.debug("Failed to stat %s", path, exc_info=True)
            raise AccessError(path, e.strerror or str(e)) from e
        return Metadata.from_stat(st)

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def user_name(self, uid: int) -> str:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError as e:
            raise IdentityError("user", uid) from e

    def group_name(self, gid: int) -> str:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError as e:
            raise IdentityError("group", gid) from e

    def read_link(self, path: Path) -> str:
        try:
            return os.readlink(path)
        except OSError as e:
            logger.debug("Failed to read link %s", path, exc_info=True)
            raise AccessError(path, e.strerror or str(e)) from e
