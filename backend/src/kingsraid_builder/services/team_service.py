"""Saving and sharing team compositions."""

import logging
import secrets
import string
from typing import Any, Callable, Mapping, Optional

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from kingsraid_builder.exceptions import IdExhausted, InvalidInput, NotFound, TeamIdCollision
from kingsraid_builder.models.team import LoadedTeam, TeamStats
from kingsraid_builder.repositories.team_repository import TeamRepository

logger = logging.getLogger(__name__)

TEAM_ID_LENGTH = 6
TEAM_ID_ALPHABET = string.ascii_letters + string.digits
MAX_ID_ATTEMPTS = 5

# Payload keys sent by the client
HEROES_KEY = "h"
TITLE_KEY = "t"
DEFAULT_TEAM_TITLE = "Untitled Team"


def generate_team_id() -> str:
    """Random 6-character alphanumeric id (62^6 candidates)."""
    return "".join(secrets.choice(TEAM_ID_ALPHABET) for _ in range(TEAM_ID_LENGTH))


class TeamService:
    """Business logic for persisted teams."""

    def __init__(
        self,
        repository: TeamRepository,
        id_factory: Callable[[], str] = generate_team_id,
        max_attempts: int = MAX_ID_ATTEMPTS,
    ):
        self.repository = repository
        self.id_factory = id_factory
        self.max_attempts = max_attempts

    def save(self, payload: Mapping[str, Any], title: Optional[str] = None) -> str:
        """Persist a team and return its new id.

        The whole payload is stored. The title is ``title`` if given, else the
        payload's ``t`` field, else a default.

        Raises:
            InvalidInput: If the payload has no truthy ``h`` (heroes) field
            IdExhausted: If every candidate id collided
            StoreFailure: On any other database error
        """
        if not isinstance(payload, Mapping) or not payload.get(HEROES_KEY):
            raise InvalidInput("Team data is required")

        title = str(title or payload.get(TITLE_KEY) or DEFAULT_TEAM_TITLE)
        data = dict(payload)

        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            retry=retry_if_exception_type(TeamIdCollision),
            reraise=True,
        )
        try:
            for attempt in retrying:
                with attempt:
                    team_id = self.id_factory()
                    self.repository.insert_team(team_id, title, data)
        except TeamIdCollision as e:
            logger.error(f"Could not find a free team id after {self.max_attempts} attempts")
            raise IdExhausted(
                f"Could not generate a unique team id after {self.max_attempts} attempts"
            ) from e

        logger.info(f"Team saved: {team_id} ({title})")
        return team_id

    def load(self, team_id: str) -> LoadedTeam:
        """Load a team and count this read.

        The returned ``access_count`` includes this read: the first load of a
        team reports 1.

        Raises:
            NotFound: If no team has this id
        """
        record = self.repository.get_team(team_id)
        if record is None:
            raise NotFound("Team not found")

        self.repository.record_access(team_id)
        access_count = record.access_count + 1
        logger.info(f"Team loaded: {team_id} (access #{access_count})")

        return LoadedTeam(
            id=record.id,
            title=record.title,
            data=record.data,
            access_count=access_count,
        )

    def stats(self) -> TeamStats:
        return self.repository.get_stats()
