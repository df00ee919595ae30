"""Hero and catalog models."""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_RARITY = 5


@dataclass
class Hero:
    """A hero as listed by the catalog. Derived from disk on every request."""

    id: str | int
    name: str
    role: str
    image_path: str
    rarity: int = DEFAULT_RARITY
    release_order_index: Optional[int] = None

    @property
    def has_release_order(self) -> bool:
        return self.release_order_index is not None


@dataclass
class HeroCatalog:
    """Result of a catalog listing, including heroes dropped for missing icons."""

    heroes: list[Hero]
    current_sort: str
    total: int = 0
    missing_heroes: list[str] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.heroes)

    @property
    def missing_count(self) -> int:
        return len(self.missing_heroes)
