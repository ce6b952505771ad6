"""Configurable Unix-style directory lister."""

from dirlist.errors import AccessError, IdentityError, ListingError
from dirlist.listing import Lister
from dirlist.models import ListingOptions
from dirlist.sources import EntrySource, OsSource

__all__ = [
    "AccessError",
    "EntrySource",
    "IdentityError",
    "Lister",
    "ListingError",
    "ListingOptions",
    "OsSource",
]
