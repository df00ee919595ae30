"""Hero class lookup utilities.

Hero definition files usually carry the class themselves; the static table
below covers heroes whose files don't, and the fallback listings that have no
definition file at all.
"""

from typing import Any, Callable, Mapping, Optional

UNKNOWN_ROLE = "Unknown"

# Known roster by class
HERO_ROLES: Mapping[str, str] = {
    # Warriors
    "Bernheim": "Warrior",
    "Kasel": "Warrior",
    "Gau": "Warrior",
    "Naila": "Warrior",
    "Ricardo": "Warrior",
    "Mitra": "Warrior",
    "Gladi": "Warrior",
    "Scarlet": "Warrior",
    # Wizards
    "Cleo": "Wizard",
    "Maria": "Wizard",
    "Aisha": "Wizard",
    "Pavel": "Wizard",
    "Arch": "Wizard",
    "Lorraine": "Wizard",
    "Theo": "Wizard",
    "Artemia": "Wizard",
    # Priests
    "Frey": "Priest",
    "Kaulah": "Priest",
    "Laias": "Priest",
    "Rephy": "Priest",
    "Annette": "Priest",
    "Baudouin": "Priest",
    "Shea": "Priest",
    "Cassandra": "Priest",
    # Knights
    "Clause": "Knight",
    "Phillop": "Knight",
    "Jane": "Knight",
    "Morrah": "Knight",
    "Sonia": "Knight",
    "Demia": "Knight",
    "Aselica": "Knight",
    "Cecilia": "Knight",
    # Assassins
    "Cain": "Assassin",
    "Roi": "Assassin",
    "Epis": "Assassin",
    "Tanya": "Assassin",
    "Fluss": "Assassin",
    "Ezekiel": "Assassin",
    "Mirianne": "Assassin",
    # Archers
    "Luna": "Archer",
    "Yanne": "Archer",
    "Selene": "Archer",
    "Reina": "Archer",
    # Mechanics
    "Lakrak": "Mechanic",
    "Rodina": "Mechanic",
    "Miruru": "Mechanic",
}

# Last-resort listing, used whenever neither definition files nor asset folders
# yield a hero (including an empty asset folder, not only an unreadable one)
DEFAULT_ROSTER: tuple[str, ...] = (
    "Annette",
    "Arch",
    "Aisha",
    "Cleo",
    "Frey",
    "Kasel",
    "Clause",
    "Roi",
)

RoleStrategy = Callable[[Mapping[str, Any], str], Optional[str]]


def _role_from_infos_class(document: Mapping[str, Any], name: str) -> Optional[str]:
    infos = document.get("infos")
    if isinstance(infos, Mapping):
        return infos.get("class")
    return None


def _role_from_role_field(document: Mapping[str, Any], name: str) -> Optional[str]:
    return document.get("role")


def _role_from_table(document: Mapping[str, Any], name: str) -> Optional[str]:
    return HERO_ROLES.get(name)


# Evaluated in order, first non-empty string wins
ROLE_STRATEGIES: tuple[RoleStrategy, ...] = (
    _role_from_infos_class,
    _role_from_role_field,
    _role_from_table,
)


def role_from_name(name: str) -> str:
    """Look up a hero's class in the static table."""
    return HERO_ROLES.get(name, UNKNOWN_ROLE)


def resolve_role(document: Mapping[str, Any], name: str) -> str:
    """Resolve a hero's class from its definition document.

    Priority:
    1. ``infos.class``
    2. top-level ``role``
    3. static table, by display name
    4. ``"Unknown"``
    """
    for strategy in ROLE_STRATEGIES:
        role = strategy(document, name)
        if isinstance(role, str) and role:
            return role
    return UNKNOWN_ROLE
