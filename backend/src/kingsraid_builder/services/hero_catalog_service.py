"""Hero catalog built from the hero data tree under the public root."""

import json
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from kingsraid_builder.exceptions import CatalogReadFailure
from kingsraid_builder.models.hero import Hero, HeroCatalog
from kingsraid_builder.services.hero_sorter import SORT_BY_NAME, normalize_sort_mode, sort_heroes
from kingsraid_builder.services.release_order import load_release_order
from kingsraid_builder.utils.hero_roles import DEFAULT_ROSTER, resolve_role, role_from_name

logger = logging.getLogger(__name__)

DEFINITIONS_SUBDIR = Path("table-data") / "heroes"
AGGREGATE_FILENAME = "heroes.json"
ASSETS_SUBDIR = Path("assets") / "heroes"
ICON_FILENAME = "ico.png"


class HeroCatalogService:
    """Lists heroes available to the team builder.

    Nothing is cached: every listing re-reads the hero definitions, the
    release order and the icon files, so data dropped into the public root
    shows up on the next request.

    Heroes come from the first source that yields any:
    1. per-hero definition files in ``<hero data>/table-data/heroes``
    2. hero folders holding an icon in ``<hero data>/assets/heroes``
    3. the built-in default roster
    """

    def __init__(
        self,
        public_dir: Path,
        hero_data_dir: str = "kingsraid-data",
        release_order_file: Optional[Path] = None,
    ):
        """Initialize the catalog.

        Args:
            public_dir: Static root served to clients
            hero_data_dir: Hero data folder, relative to public_dir (also its URL prefix)
            release_order_file: JSON file mapping hero name to release rank
        """
        self.public_dir = Path(public_dir)
        self.hero_data_dir = hero_data_dir.strip("/")
        self.release_order_file = release_order_file

    @property
    def definitions_dir(self) -> Path:
        return self.public_dir / self.hero_data_dir / DEFINITIONS_SUBDIR

    @property
    def assets_dir(self) -> Path:
        return self.public_dir / self.hero_data_dir / ASSETS_SUBDIR

    def image_path(self, name: str) -> str:
        """URL of a hero's icon under the public root."""
        return f"/{self.hero_data_dir}/{ASSETS_SUBDIR.as_posix()}/{name}/{ICON_FILENAME}"

    def has_icon(self, name: str) -> bool:
        return (self.assets_dir / name / ICON_FILENAME).is_file()

    def list_heroes(self, sort: Optional[str] = SORT_BY_NAME) -> HeroCatalog:
        """List heroes with an icon on disk, sorted by ``sort``.

        Heroes without an icon are left out of ``heroes`` but named in
        ``missing_heroes``. Read failures degrade to the next hero source or
        an empty catalog; they are never raised.
        """
        current_sort = normalize_sort_mode(sort)
        release_order = self._release_positions()
        heroes = self._collect_heroes()

        available: list[Hero] = []
        missing: list[str] = []
        for hero in heroes:
            hero.release_order_index = release_order.get(hero.name)
            if self.has_icon(hero.name):
                available.append(hero)
            else:
                missing.append(hero.name)

        catalog = HeroCatalog(
            heroes=sort_heroes(available, current_sort),
            current_sort=current_sort,
            total=len(heroes),
            missing_heroes=missing,
        )

        logger.info(f"{catalog.loaded}/{catalog.total} heroes with icons (sort={current_sort})")
        for hero in catalog.heroes:
            logger.debug(f"  {hero.name}: {hero.role}")
        if missing:
            logger.info(f"Heroes missing an icon: {', '.join(missing)}")

        return catalog

    def _release_positions(self) -> dict[str, int]:
        if self.release_order_file is None:
            return {}
        order = load_release_order(self.release_order_file)
        return {name: index for index, name in enumerate(order)}

    def _sources(self) -> tuple[Callable[[], list[Hero]], ...]:
        return (
            self._heroes_from_definitions,
            self._heroes_from_asset_folders,
            self._heroes_from_default_roster,
        )

    def _collect_heroes(self) -> list[Hero]:
        for source in self._sources():
            try:
                heroes = source()
            except CatalogReadFailure as e:
                logger.warning(f"{e.message}; trying next hero source")
                continue
            if heroes:
                return heroes
            logger.warning(f"No heroes from {source.__name__.lstrip('_')}; trying next hero source")
        return []

    def _heroes_from_definitions(self) -> list[Hero]:
        """Read every per-hero definition file, skipping unreadable ones."""
        definitions_dir = self.definitions_dir
        if not definitions_dir.is_dir():
            return []

        try:
            files = sorted(
                path
                for path in definitions_dir.iterdir()
                if path.suffix == ".json" and path.name != AGGREGATE_FILENAME
            )
        except OSError as e:
            raise CatalogReadFailure(f"Cannot scan hero definitions in {definitions_dir}: {e}") from e

        logger.info(f"{len(files)} hero definition files in {definitions_dir}")

        heroes: list[Hero] = []
        for path in files:
            try:
                with open(path, encoding="utf-8") as f:
                    document = json.load(f)
            except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping hero file {path.name}: {e}")
                continue
            if not isinstance(document, dict):
                logger.warning(f"Skipping hero file {path.name}: not a JSON object")
                continue

            name = self._display_name(document, path)
            heroes.append(
                Hero(
                    id=name,
                    name=name,
                    role=resolve_role(document, name),
                    image_path=self.image_path(name),
                )
            )
        return heroes

    def _heroes_from_asset_folders(self) -> list[Hero]:
        """List hero folders that contain an icon."""
        assets_dir = self.assets_dir
        if not assets_dir.is_dir():
            return []

        try:
            names = sorted(
                path.name
                for path in assets_dir.iterdir()
                if path.is_dir() and (path / ICON_FILENAME).is_file()
            )
        except OSError as e:
            raise CatalogReadFailure(f"Cannot scan hero folders in {assets_dir}: {e}") from e

        return self._numbered_heroes(names)

    def _heroes_from_default_roster(self) -> list[Hero]:
        return self._numbered_heroes(DEFAULT_ROSTER)

    def _numbered_heroes(self, names: Iterable[str]) -> list[Hero]:
        return [
            Hero(
                id=index,
                name=name,
                role=role_from_name(name),
                image_path=self.image_path(name),
            )
            for index, name in enumerate(names, start=1)
        ]

    @staticmethod
    def _display_name(document: dict, path: Path) -> str:
        infos = document.get("infos")
        if isinstance(infos, dict):
            name = infos.get("name")
            if isinstance(name, str) and name:
                return name
        return path.stem
