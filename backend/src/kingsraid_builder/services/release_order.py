"""Hero release order loading."""

import json
import logging
from numbers import Real
from pathlib import Path

logger = logging.getLogger(__name__)


def load_release_order(path: Path) -> list[str]:
    """Load hero names ordered by release.

    The file is a JSON object mapping hero name to a numeric rank. Names come
    back sorted by ascending rank, ties broken by name. Entries whose rank is
    not a number are ignored.

    Returns an empty list when the file is missing, unparsable or not an
    object; never raises.
    """
    if not path.exists():
        return []

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load release order from {path}: {e}")
        return []

    if not isinstance(data, dict):
        logger.warning(f"Release order at {path} is not a JSON object, ignoring it")
        return []

    ranked = [
        (rank, name)
        for name, rank in data.items()
        if isinstance(rank, Real) and not isinstance(rank, bool)
    ]
    ranked.sort()
    return [name for _, name in ranked]
