"""Business logic services."""

from kingsraid_builder.services.hero_catalog_service import HeroCatalogService
from kingsraid_builder.services.hero_sorter import (
    SORT_BY_NAME,
    SORT_BY_RELEASE,
    normalize_sort_mode,
    sort_heroes,
)
from kingsraid_builder.services.release_order import load_release_order
from kingsraid_builder.services.team_service import TeamService, generate_team_id

__all__ = [
    "HeroCatalogService",
    "SORT_BY_NAME",
    "SORT_BY_RELEASE",
    "normalize_sort_mode",
    "sort_heroes",
    "load_release_order",
    "TeamService",
    "generate_team_id",
]
