"""Data models for the Kings Raid team builder."""

from kingsraid_builder.models.hero import Hero, HeroCatalog
from kingsraid_builder.models.team import LoadedTeam, TeamRecord, TeamStats

__all__ = [
    "Hero",
    "HeroCatalog",
    "LoadedTeam",
    "TeamRecord",
    "TeamStats",
]
