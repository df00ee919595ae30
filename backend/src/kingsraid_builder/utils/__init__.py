"""Utility modules for kingsraid_builder."""

from kingsraid_builder.utils.hero_roles import (
    DEFAULT_ROSTER,
    HERO_ROLES,
    UNKNOWN_ROLE,
    resolve_role,
    role_from_name,
)

__all__ = [
    "DEFAULT_ROSTER",
    "HERO_ROLES",
    "UNKNOWN_ROLE",
    "resolve_role",
    "role_from_name",
]
