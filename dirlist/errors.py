"""Fatal errors raised while building a listing."""

from pathlib import Path


class ListingError(Exception):
    """Base class for errors that abort the whole listing call."""


class AccessError(ListingError):
    """A directory, metadata or symlink read failed for ``path``."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot access '{self.path}': {reason}")


class IdentityError(ListingError):
    """A uid or gid has no matching account or group."""

    def __init__(self, kind: str, ident: int):
        self.kind = kind
        self.ident = ident
        super().__init__(f"No {kind} name for id {ident}")
