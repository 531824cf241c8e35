"""
Identity Allocator

Issues per-type sequential item ids of the form ``<typeTag>-<sequence>``.
"""

from __future__ import annotations

from collections.abc import Iterable

ID_SEPARATOR = "-"


def split_id(item_id: str) -> tuple[str, int] | None:
    """
    Split an item id on its last separator.

    Returns (type_tag, sequence), or None when the suffix is not a
    positive integer.
    """
    type_tag, sep, suffix = item_id.rpartition(ID_SEPARATOR)
    if not sep or not type_tag or not suffix.isdigit():
        return None
    sequence = int(suffix)
    if sequence < 1:
        return None
    return type_tag, sequence


class IdentityAllocator:
    """Tracks the highest sequence issued for each type tag."""

    def __init__(self):
        self._counters: dict[str, int] = {}

    def next_id(self, type_tag: str) -> str:
        """Return a fresh id for ``type_tag``."""
        sequence = self._counters.get(type_tag, 0) + 1
        self._counters[type_tag] = sequence
        return f"{type_tag}{ID_SEPARATOR}{sequence}"

    def reseed(self, item_ids: Iterable[str]) -> None:
        """
        Rebuild counters from restored item ids.

        Each type tag resumes after the highest sequence observed, so new
        ids never collide with restored ones. Malformed ids are ignored.
        """
        counters: dict[str, int] = {}
        for item_id in item_ids:
            parsed = split_id(item_id)
            if parsed is None:
                continue
            type_tag, sequence = parsed
            counters[type_tag] = max(counters.get(type_tag, 0), sequence)
        self._counters = counters

    def peek(self, type_tag: str) -> int:
        """Highest sequence issued so far for ``type_tag`` (0 if none)."""
        return self._counters.get(type_tag, 0)
