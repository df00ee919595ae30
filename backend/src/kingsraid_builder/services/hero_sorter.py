"""Hero list ordering."""

import unicodedata
from typing import Iterable

from kingsraid_builder.models.hero import Hero

SORT_BY_NAME = "name"
SORT_BY_RELEASE = "release"
SORT_MODES = frozenset({SORT_BY_NAME, SORT_BY_RELEASE})


def normalize_sort_mode(mode: str | None) -> str:
    """Map a requested sort mode to a supported one, defaulting to name order."""
    if mode and mode.strip().lower() in SORT_MODES:
        return mode.strip().lower()
    return SORT_BY_NAME


def name_key(name: str) -> tuple[str, str]:
    """Collation key: accents stripped and casefolded, raw name as tiebreak."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name)


def _release_key(hero: Hero) -> tuple:
    # Heroes with a known release rank come first
    if hero.release_order_index is None:
        return (1, 0, name_key(hero.name))
    return (0, hero.release_order_index, name_key(hero.name))


def sort_heroes(heroes: Iterable[Hero], mode: str = SORT_BY_NAME) -> list[Hero]:
    """Return heroes ordered by ``mode``; unknown modes sort by name."""
    if normalize_sort_mode(mode) == SORT_BY_RELEASE:
        return sorted(heroes, key=_release_key)
    return sorted(heroes, key=lambda hero: name_key(hero.name))
