"""REST endpoints for saved teams."""

from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Body, Request

from kingsraid_builder.models.api import CamelModel

router = APIRouter(prefix="/api", tags=["teams"])


class SaveTeamResponse(CamelModel):
    success: bool = True
    id: str


class TeamPayload(CamelModel):
    """A saved team as read back by a client."""

    title: str
    data: dict[str, Any]
    access_count: int


class TeamResponse(CamelModel):
    success: bool = True
    data: TeamPayload


class StatsInfo(CamelModel):
    total_teams: int
    total_accesses: int
    latest_creation_timestamp: datetime | None


class StatsResponse(CamelModel):
    success: bool = True
    stats: StatsInfo


@router.post("/teams", response_model=SaveTeamResponse)
async def save_team(request: Request, payload: Annotated[Any, Body()] = None):
    """Save a team. Body: ``{"h": <heroes>, "t": <title, optional>}``."""
    team_id = request.app.state.team_service.save(payload)
    return SaveTeamResponse(id=team_id)


@router.get("/teams/{team_id}", response_model=TeamResponse)
async def get_team(request: Request, team_id: str):
    """Load a saved team; counts as one access."""
    team = request.app.state.team_service.load(team_id)
    return TeamResponse(
        data=TeamPayload(title=team.title, data=team.data, access_count=team.access_count)
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats(request: Request):
    """Aggregate usage of saved teams."""
    stats = request.app.state.team_service.stats()
    return StatsResponse(
        stats=StatsInfo(
            total_teams=stats.total_teams,
            total_accesses=stats.total_accesses,
            latest_creation_timestamp=stats.latest_creation_timestamp,
        )
    )
