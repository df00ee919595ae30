"""Tests for the hero catalog."""
import json
from unittest.mock import patch

import pytest

from kingsraid_builder.services.hero_catalog_service import HeroCatalogService
from kingsraid_builder.utils.hero_roles import DEFAULT_ROSTER


@pytest.fixture
def public_dir(tmp_path):
    """Empty public root with the hero data folders in place."""
    root = tmp_path / "public"
    (root / "kingsraid-data" / "table-data" / "heroes").mkdir(parents=True)
    (root / "kingsraid-data" / "assets" / "heroes").mkdir(parents=True)
    return root


def _write_hero(public_dir, filename, document):
    path = public_dir / "kingsraid-data" / "table-data" / "heroes" / filename
    path.write_text(document if isinstance(document, str) else json.dumps(document))


def _write_icon(public_dir, name):
    folder = public_dir / "kingsraid-data" / "assets" / "heroes" / name
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "ico.png").write_bytes(b"\x89PNG")


def _write_release_order(public_dir, order):
    path = public_dir / "kingsraid-data" / "release_order.json"
    path.write_text(json.dumps(order))
    return path


def _catalog(public_dir, release_order_file=None):
    return HeroCatalogService(public_dir, "kingsraid-data", release_order_file)


def _names(catalog):
    return [hero.name for hero in catalog.heroes]


# ======================================================================
# Definition files
# ======================================================================


def test_lists_heroes_from_definition_files(public_dir):
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel", "class": "Warrior"}})
    _write_hero(public_dir, "Frey.json", {"infos": {"name": "Frey", "class": "Priest"}})
    _write_icon(public_dir, "Kasel")
    _write_icon(public_dir, "Frey")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Frey", "Kasel"]
    frey = catalog.heroes[0]
    assert frey.id == "Frey"
    assert frey.role == "Priest"
    assert frey.rarity == 5
    assert frey.image_path == "/kingsraid-data/assets/heroes/Frey/ico.png"
    assert catalog.total == 2
    assert catalog.loaded == 2
    assert catalog.missing_heroes == []
    assert catalog.missing_count == 0
    assert catalog.current_sort == "name"


def test_name_falls_back_to_filename(public_dir):
    _write_hero(public_dir, "Cleo.json", {"infos": {}})
    _write_icon(public_dir, "Cleo")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Cleo"]
    # Role comes from the static table by display name
    assert catalog.heroes[0].role == "Wizard"


def test_role_field_and_unknown_role(public_dir):
    _write_hero(public_dir, "Newbie.json", {"infos": {"name": "Newbie"}, "role": "Archer"})
    _write_hero(public_dir, "Stranger.json", {"infos": {"name": "Stranger"}})
    _write_icon(public_dir, "Newbie")
    _write_icon(public_dir, "Stranger")

    roles = {hero.name: hero.role for hero in _catalog(public_dir).list_heroes().heroes}

    assert roles == {"Newbie": "Archer", "Stranger": "Unknown"}


def test_aggregate_file_and_non_json_files_ignored(public_dir):
    _write_hero(public_dir, "heroes.json", {"infos": {"name": "Everyone"}})
    _write_hero(public_dir, "notes.txt", "not a hero")
    _write_hero(public_dir, "Roi.json", {"infos": {"name": "Roi"}})
    _write_icon(public_dir, "Roi")
    _write_icon(public_dir, "Everyone")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Roi"]
    assert catalog.total == 1


def test_unparsable_file_is_skipped(public_dir):
    _write_hero(public_dir, "Broken.json", "{oops")
    _write_hero(public_dir, "List.json", ["Kasel"])
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel"}})
    _write_icon(public_dir, "Kasel")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Kasel"]
    assert catalog.total == 1


def test_heroes_without_icon_reported_missing(public_dir):
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel"}})
    _write_hero(public_dir, "Ghost.json", {"infos": {"name": "Ghost"}})
    _write_icon(public_dir, "Kasel")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Kasel"]
    assert catalog.missing_heroes == ["Ghost"]
    assert catalog.total == 2
    assert catalog.loaded == 1
    assert catalog.missing_count == 1


def test_catalog_is_not_cached(public_dir):
    service = _catalog(public_dir)
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel"}})
    _write_icon(public_dir, "Kasel")
    assert _names(service.list_heroes()) == ["Kasel"]

    _write_hero(public_dir, "Arch.json", {"infos": {"name": "Arch"}})
    _write_icon(public_dir, "Arch")
    assert _names(service.list_heroes()) == ["Arch", "Kasel"]


# ======================================================================
# Sorting
# ======================================================================


def test_release_sort_uses_release_order(public_dir):
    for name in ["Aisha", "Kasel", "Frey", "Roi"]:
        _write_hero(public_dir, f"{name}.json", {"infos": {"name": name}})
        _write_icon(public_dir, name)
    release_file = _write_release_order(public_dir, {"Roi": 1, "Kasel": 2, "Frey": 3})

    catalog = _catalog(public_dir, release_file).list_heroes("release")

    assert _names(catalog) == ["Roi", "Kasel", "Frey", "Aisha"]
    assert catalog.current_sort == "release"
    indexes = {hero.name: hero.release_order_index for hero in catalog.heroes}
    assert indexes == {"Roi": 0, "Kasel": 1, "Frey": 2, "Aisha": None}
    assert [hero.has_release_order for hero in catalog.heroes] == [True, True, True, False]


def test_release_sort_without_release_file_sorts_by_name(public_dir):
    for name in ["Roi", "Arch", "Kasel"]:
        _write_hero(public_dir, f"{name}.json", {"infos": {"name": name}})
        _write_icon(public_dir, name)

    catalog = _catalog(public_dir, public_dir / "missing.json").list_heroes("release")

    assert _names(catalog) == ["Arch", "Kasel", "Roi"]
    assert catalog.current_sort == "release"


def test_name_sort_keeps_release_annotations(public_dir):
    for name in ["Roi", "Arch"]:
        _write_hero(public_dir, f"{name}.json", {"infos": {"name": name}})
        _write_icon(public_dir, name)
    release_file = _write_release_order(public_dir, {"Roi": 1})

    catalog = _catalog(public_dir, release_file).list_heroes("name")

    assert _names(catalog) == ["Arch", "Roi"]
    assert catalog.heroes[1].release_order_index == 0


def test_unknown_sort_mode_defaults_to_name(public_dir):
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel"}})
    _write_icon(public_dir, "Kasel")

    assert _catalog(public_dir).list_heroes("power").current_sort == "name"


# ======================================================================
# Fallback sources
# ======================================================================


def test_falls_back_to_asset_folders_without_definitions(tmp_path):
    public_dir = tmp_path / "public"
    for name in ["Kasel", "Aisha"]:
        _write_icon(public_dir, name)
    # Folder without an icon is not a hero
    (public_dir / "kingsraid-data" / "assets" / "heroes" / "Empty").mkdir()

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Aisha", "Kasel"]
    assert [hero.id for hero in catalog.heroes] == [1, 2]
    assert [hero.role for hero in catalog.heroes] == ["Wizard", "Warrior"]
    assert catalog.missing_heroes == []


def test_falls_back_to_asset_folders_when_no_definition_parses(public_dir):
    _write_hero(public_dir, "Broken.json", "{oops")
    _write_icon(public_dir, "Frey")

    catalog = _catalog(public_dir).list_heroes()

    assert _names(catalog) == ["Frey"]
    assert catalog.heroes[0].id == 1
    assert catalog.heroes[0].role == "Priest"


def test_falls_back_to_default_roster_when_nothing_on_disk(tmp_path):
    catalog = _catalog(tmp_path / "public").list_heroes()

    # No icons on disk either: every default hero is reported missing
    assert catalog.heroes == []
    assert sorted(catalog.missing_heroes) == sorted(DEFAULT_ROSTER)
    assert catalog.total == len(DEFAULT_ROSTER)


def test_unreadable_definitions_dir_degrades(public_dir):
    _write_hero(public_dir, "Kasel.json", {"infos": {"name": "Kasel"}})
    _write_icon(public_dir, "Kasel")
    service = _catalog(public_dir)

    real_iterdir = type(public_dir).iterdir

    def failing_iterdir(path):
        if path == service.definitions_dir:
            raise PermissionError("denied")
        return real_iterdir(path)

    with patch.object(type(public_dir), "iterdir", failing_iterdir):
        catalog = service.list_heroes()

    # Asset folder listing takes over with numbered ids
    assert _names(catalog) == ["Kasel"]
    assert catalog.heroes[0].id == 1
