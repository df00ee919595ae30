"""REST endpoints for the hero catalog."""

from typing import Annotated

from fastapi import APIRouter, Query, Request

from kingsraid_builder.models.api import CamelModel
from kingsraid_builder.services.hero_sorter import SORT_BY_NAME

router = APIRouter(prefix="/api", tags=["heroes"])


class HeroInfo(CamelModel):
    """A hero with an icon available."""

    id: str | int
    name: str
    role: str
    rarity: int
    image_path: str
    release_order_index: int | None
    has_release_order: bool


class HeroListResponse(CamelModel):
    """Catalog listing plus load diagnostics."""

    heroes: list[HeroInfo]
    missing_heroes: list[str]
    total: int
    loaded: int
    missing_count: int
    current_sort: str


@router.get("/heroes", response_model=HeroListResponse)
async def list_heroes(
    request: Request,
    sort: Annotated[str, Query(description="name or release")] = SORT_BY_NAME,
):
    """List heroes that have an icon, sorted by name or release order."""
    catalog = request.app.state.hero_catalog.list_heroes(sort)

    return HeroListResponse(
        heroes=[
            HeroInfo(
                id=hero.id,
                name=hero.name,
                role=hero.role,
                rarity=hero.rarity,
                image_path=hero.image_path,
                release_order_index=hero.release_order_index,
                has_release_order=hero.has_release_order,
            )
            for hero in catalog.heroes
        ],
        missing_heroes=catalog.missing_heroes,
        total=catalog.total,
        loaded=catalog.loaded,
        missing_count=catalog.missing_count,
        current_sort=catalog.current_sort,
    )
