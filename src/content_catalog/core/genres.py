"""
Case-insensitive genre set arithmetic.

Genres are free-text tags that must be unique within one record regardless
of case. These functions compute what an add or remove request would do to
an existing genre list without touching any record; the service decides
whether to apply the outcome.

Comparison uses :meth:`str.casefold`. The stored spelling of a tag is never
rewritten: ``"genre1"`` matches ``"Genre1"`` but the list keeps ``"Genre1"``.

Examples:
    >>> partition(["Genre1", "Genre2"], ["genre1", "Genre3"])
    GenrePartition(additions=['Genre3'], duplicates=['genre1'], repeated=[])
    >>> partition(["Genre1"], ["Genre3", "genre3"])
    GenrePartition(additions=['Genre3'], duplicates=[], repeated=['genre3'])
    >>> intersect(["Genre1", "Genre2"], ["GENRE2", "Other"])
    ['GENRE2']
    >>> remove(["Genre1", "Genre2", "Genre3"], ["genre2"])
    ['Genre1', 'Genre3']

Tags:
    genres, set-merge, case-insensitive, pure-functions, content-catalog
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class GenrePartition(NamedTuple):
    """Outcome of :func:`partition`.

    Attributes:
        additions: Incoming tags not yet present, in input order.
        duplicates: Incoming tags already on the record, in input order.
        repeated: Later copies of a tag that an earlier incoming tag already
            adds. They are folded into that first addition.
    """

    additions: list[str]
    duplicates: list[str]
    repeated: list[str]


def _fold(genres: Iterable[str]) -> set[str]:
    return {genre.casefold() for genre in genres}


def partition(existing: Iterable[str], incoming: Iterable[str]) -> GenrePartition:
    """Split ``incoming`` into new tags, tags already present, and repeats.

    Only a match against ``existing`` makes a tag a duplicate. A tag given
    twice in ``incoming`` is added once, with its first spelling.
    """
    present = _fold(existing)
    added: set[str] = set()
    result = GenrePartition([], [], [])

    for genre in incoming:
        key = genre.casefold()
        if key in present:
            result.duplicates.append(genre)
        elif key in added:
            result.repeated.append(genre)
        else:
            added.add(key)
            result.additions.append(genre)

    return result


def intersect(existing: Iterable[str], to_remove: Iterable[str]) -> list[str]:
    """Return the requested tags that match an existing tag, in request order."""
    present = _fold(existing)
    return [genre for genre in to_remove if genre.casefold() in present]


def remove(existing: Iterable[str], to_remove: Iterable[str]) -> list[str]:
    """Return ``existing`` without any tag matching ``to_remove``.

    Relative order of the surviving tags is preserved.
    """
    doomed = _fold(to_remove)
    return [genre for genre in existing if genre.casefold() not in doomed]


__all__ = ["GenrePartition", "partition", "intersect", "remove"]
