"""Linguistic text ordering for point fields and file names."""

from functools import lru_cache

from pyuca import Collator


@lru_cache(maxsize=None)
def _collator() -> Collator:
    # Loading the collation table takes a moment; once per process is enough
    return Collator()


def text_sort_key(text: str) -> tuple[tuple[int, ...], str]:
    """Sort key ordering text by the Unicode Collation Algorithm.

    Letters compare alphabetically regardless of case, and lowercase sorts before
    uppercase when that is the only difference ('a.pts' < 'B.pts', 'apple' < 'Apple').
    Strings the collation considers equal are ordered by code point.
    """
    return tuple(_collator().sort_key(text)), text
