"""Tests for hero ordering."""
from kingsraid_builder.models.hero import Hero
from kingsraid_builder.services.hero_sorter import normalize_sort_mode, sort_heroes


def _hero(name, release_index=None):
    return Hero(
        id=name,
        name=name,
        role="Unknown",
        image_path=f"/kingsraid-data/assets/heroes/{name}/ico.png",
        release_order_index=release_index,
    )


def _names(heroes):
    return [hero.name for hero in heroes]


def test_name_sort_is_alphabetical():
    heroes = [_hero("Roi"), _hero("Arch"), _hero("Kasel")]
    assert _names(sort_heroes(heroes, "name")) == ["Arch", "Kasel", "Roi"]


def test_name_sort_ignores_case_and_accents():
    heroes = [_hero("zed"), _hero("Élise"), _hero("Bob"), _hero("alice")]
    assert _names(sort_heroes(heroes, "name")) == ["alice", "Bob", "Élise", "zed"]


def test_name_sort_is_non_decreasing():
    heroes = [_hero(n) for n in ["Luna", "Cain", "Gau", "Aisha", "Theo", "Epis"]]
    names = [name.casefold() for name in _names(sort_heroes(heroes))]
    assert names == sorted(names)


def test_release_sort_ranked_before_unranked():
    heroes = [
        _hero("Aisha"),
        _hero("Roi", release_index=2),
        _hero("Zed"),
        _hero("Kasel", release_index=0),
        _hero("Frey", release_index=1),
    ]
    result = sort_heroes(heroes, "release")
    assert _names(result) == ["Kasel", "Frey", "Roi", "Aisha", "Zed"]


def test_release_sort_unranked_fall_back_to_name():
    heroes = [_hero("Roi"), _hero("Arch"), _hero("Cleo")]
    assert _names(sort_heroes(heroes, "release")) == ["Arch", "Cleo", "Roi"]


def test_sort_returns_new_list():
    heroes = [_hero("Roi"), _hero("Arch")]
    result = sort_heroes(heroes, "name")
    assert result is not heroes
    assert _names(heroes) == ["Roi", "Arch"]


def test_unknown_mode_sorts_by_name():
    heroes = [_hero("Roi", release_index=0), _hero("Arch")]
    assert _names(sort_heroes(heroes, "power")) == ["Arch", "Roi"]


def test_normalize_sort_mode():
    assert normalize_sort_mode("release") == "release"
    assert normalize_sort_mode(" Release ") == "release"
    assert normalize_sort_mode("name") == "name"
    assert normalize_sort_mode(None) == "name"
    assert normalize_sort_mode("") == "name"
    assert normalize_sort_mode("rarity") == "name"
