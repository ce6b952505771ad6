"""Shared fixtures: an in-memory EntrySource."""

import stat
from collections import Counter
from datetime import datetime
from pathlib import Path

import pytest

from dirlist.errors import AccessError, IdentityError
from dirlist.models import Entry, Metadata

JAN_5 = datetime(2024, 1, 5, 9, 7).timestamp()


def make_meta(**overrides) -> Metadata:
    """Metadata for a 0644 regular file unless overridden."""
    data = {
        "inode": 100,
        "nlink": 1,
        "uid": 1000,
        "gid": 1000,
        "size": 0,
        "blocks": 0,
        "block_size": 4096,
        "mode": stat.S_IFREG | 0o644,
        "mtime": JAN_5,
        "creation_time": JAN_5,
    }
    data.update(overrides)
    data.setdefault("is_dir", stat.S_ISDIR(data["mode"]))
    data.setdefault("is_symlink", stat.S_ISLNK(data["mode"]))
    return Metadata(**data)


def make_entry(name: str, **overrides) -> Entry:
    return Entry(name=name, path=Path(name), metadata=make_meta(**overrides))


def make_dir_entry(name: str, **overrides) -> Entry:
    overrides.setdefault("mode", stat.S_IFDIR | 0o755)
    return make_entry(name, **overrides)


class FakeSource:
    """EntrySource over dictionaries, counting every metadata read."""

    def __init__(self):
        self.children: dict[Path, list[Path]] = {}
        self.meta: dict[Path, Metadata] = {}
        self.links: dict[Path, str] = {}
        self.users = {1000: "alice", 0: "root"}
        self.groups = {1000: "staff", 0: "wheel"}
        self.stat_calls: Counter = Counter()
        self.followed: set[Path] = set()

    def add_dir(self, path, children=(), **overrides) -> Path:
        path = Path(path)
        overrides.setdefault("mode", stat.S_IFDIR | 0o755)
        self.meta[path] = make_meta(**overrides)
        self.meta[path / ".."] = make_meta(mode=stat.S_IFDIR | 0o755, inode=2)
        self.children[path] = []
        for name in children:
            self.children[path].append(path / name)
        return path

    def add_file(self, path, **overrides) -> Path:
        path = Path(path)
        self.meta[path] = make_meta(**overrides)
        return path

    def add_link(self, path, target: str, **overrides) -> Path:
        path = Path(path)
        overrides.setdefault("mode", stat.S_IFLNK | 0o777)
        self.meta[path] = make_meta(**overrides)
        self.links[path] = target
        return path

    def list_directory(self, path: Path) -> list[Path]:
        try:
            return list(self.children[Path(path)])
        except KeyError:
            raise AccessError(path, "Not a directory") from None

    def metadata(self, path: Path, follow_symlinks: bool = False) -> Metadata:
        self.stat_calls[Path(path)] += 1
        if follow_symlinks:
            self.followed.add(Path(path))
        try:
            return self.meta[Path(path)]
        except KeyError:
            raise AccessError(path, "No such file or directory") from None

    def is_directory(self, path: Path) -> bool:
        meta = self.meta.get(Path(path))
        return meta is not None and meta.is_dir

    def user_name(self, uid: int) -> str:
        try:
            return self.users[uid]
        except KeyError:
            raise IdentityError("user", uid) from None

    def group_name(self, gid: int) -> str:
        try:
            return self.groups[gid]
        except KeyError:
            raise IdentityError("group", gid) from None

    def read_link(self, path: Path) -> str:
        try:
            return self.links[Path(path)]
        except KeyError:
            raise AccessError(path, "Invalid argument") from None


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def project_dir(source):
    """Directory with a hidden file, a backup, two files and a subdirectory."""
    root = source.add_dir("proj", [".hidden", "b.txt", "a.txt~", "a.txt", "sub"])
    source.add_file(root / ".hidden", inode=11)
    source.add_file(root / "b.txt", inode=12, size=20, blocks=8)
    source.add_file(root / "a.txt~", inode=13)
    source.add_file(root / "a.txt", inode=14, size=5, blocks=8)
    source.add_dir(root / "sub", inode=15, size=4096, blocks=8, nlink=2)
    return root
