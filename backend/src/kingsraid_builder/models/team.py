"""Persisted team models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class TeamRecord:
    """A row of the teams table."""

    id: str
    title: str
    data: dict[str, Any]
    created_at: datetime
    access_count: int
    last_accessed_at: datetime


@dataclass
class LoadedTeam:
    """A team as returned to a reader.

    ``access_count`` counts the read that produced it (first read is 1).
    """

    id: str
    title: str
    data: dict[str, Any]
    access_count: int


@dataclass
class TeamStats:
    """Aggregate usage of the team store."""

    total_teams: int
    total_accesses: int
    latest_creation_timestamp: Optional[datetime]
