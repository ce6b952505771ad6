"""Tests for hidden and backup entry filtering."""

from pathlib import Path

import pytest

from dirlist.filtering import filter_entries
from dirlist.models import ListingOptions, RawEntry

DIRECTORY = Path("proj")


def raw(*names):
    return [RawEntry(name=n, path=DIRECTORY / n) for n in names]


def names(entries):
    return [e.name for e in entries]


class TestHiddenEntries:
    """Dotfiles are only shown with -a or -A."""

    def test_default_drops_dotfiles(self):
        result = filter_entries(raw(".hidden", "a", ".git"), ListingOptions(), DIRECTORY)
        assert names(result) == ["a"]

    def test_almost_all_keeps_dotfiles_without_synthetic_entries(self):
        result = filter_entries(raw(".hidden", "a"), ListingOptions(almost_all=True), DIRECTORY)
        assert names(result) == [".hidden", "a"]

    def test_all_appends_dot_and_dotdot_last(self):
        result = filter_entries(raw("a", ".hidden"), ListingOptions(show_all=True), DIRECTORY)
        assert names(result) == ["a", ".hidden", ".", ".."]
        assert result[-2].path == DIRECTORY / "."
        assert result[-1].path == DIRECTORY / ".."

    def test_synthetic_entries_read_through_symlinks(self):
        result = filter_entries(raw("a"), ListingOptions(show_all=True), DIRECTORY)
        assert [e.follow_symlinks for e in result] == [False, True, True]

    @pytest.mark.parametrize(
        "options",
        [
            ListingOptions(),
            ListingOptions(almost_all=True),
            ListingOptions(ignore_backups=True),
            ListingOptions(almost_all=True, ignore_backups=True),
        ],
    )
    def test_synthetic_entries_only_with_all(self, options):
        result = filter_entries(raw("a"), options, DIRECTORY)
        assert "." not in names(result)
        assert ".." not in names(result)


class TestBackupEntries:
    """Names ending in ~ are hidden by -B, independently of the dot rule."""

    def test_backups_kept_by_default(self):
        assert names(filter_entries(raw("a~", "a"), ListingOptions(), DIRECTORY)) == ["a~", "a"]

    def test_ignore_backups_drops_tilde_names(self):
        result = filter_entries(raw("a~", "a", "b~"), ListingOptions(ignore_backups=True), DIRECTORY)
        assert names(result) == ["a"]

    def test_hidden_backup_dropped_even_with_all(self):
        options = ListingOptions(show_all=True, ignore_backups=True)
        result = filter_entries(raw(".swap~", ".rc"), options, DIRECTORY)
        assert names(result) == [".rc", ".", ".."]

    def test_synthetic_entries_exempt_from_backup_rule(self):
        options = ListingOptions(show_all=True, ignore_backups=True)
        result = filter_entries([], options, DIRECTORY)
        assert names(result) == [".", ".."]

    def test_input_order_preserved(self):
        result = filter_entries(raw("z", "a", "m"), ListingOptions(), DIRECTORY)
        assert names(result) == ["z", "a", "m"]
