"""DuckDB-based storage for shared teams."""

import json
import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, Optional

import duckdb

from kingsraid_builder.exceptions import StoreFailure, TeamIdCollision
from kingsraid_builder.models.team import TeamRecord, TeamStats

logger = logging.getLogger(__name__)

IN_MEMORY = ":memory:"

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS teams (
        id VARCHAR PRIMARY KEY,
        title VARCHAR NOT NULL,
        data VARCHAR NOT NULL,
        created_at TIMESTAMP NOT NULL,
        access_count INTEGER NOT NULL DEFAULT 0,
        last_accessed_at TIMESTAMP NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_teams_created_at ON teams(created_at)",
    "CREATE INDEX IF NOT EXISTS idx_teams_last_accessed_at ON teams(last_accessed_at)",
]


class TeamRepository:
    """Data access layer for the ``teams`` table.

    Owns a single DuckDB connection for the life of the process; each
    operation runs on its own cursor. Call ``close()`` on shutdown.
    """

    def __init__(self, database_path: str | Path):
        """Open (or create) the team store.

        Args:
            database_path: Path to the .duckdb file, or ":memory:"

        Raises:
            StoreFailure: If the database can't be opened or initialized
        """
        self._db_path = database_path if database_path == IN_MEMORY else Path(database_path)
        self._conn: Optional[duckdb.DuckDBPyConnection] = None

        try:
            if isinstance(self._db_path, Path):
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = duckdb.connect(str(self._db_path))
            for statement in SCHEMA:
                self._conn.execute(statement)
        except (duckdb.Error, OSError) as e:
            self.close()
            raise StoreFailure(f"Cannot open team store at {self._db_path}: {e}") from e

        logger.info(f"TeamRepository: Using {self._db_path} ({self.count_teams()} teams)")

    @property
    def database_path(self) -> str | Path:
        return self._db_path

    @contextmanager
    def _cursor(self, action: str) -> Iterator[duckdb.DuckDBPyConnection]:
        if self._conn is None:
            raise StoreFailure(f"Cannot {action}: team store is closed")
        try:
            with self._conn.cursor() as cursor:
                yield cursor
        except duckdb.Error as e:
            raise StoreFailure(f"Cannot {action}: {e}") from e

    def insert_team(self, team_id: str, title: str, data: dict[str, Any]) -> None:
        """Insert a new team row.

        Raises:
            TeamIdCollision: If ``team_id`` is already taken; nothing is written
            StoreFailure: On any other database error
        """
        now = datetime.now()
        with self._cursor("save team") as cursor:
            try:
                cursor.execute(
                    """
                    INSERT INTO teams (id, title, data, created_at, access_count, last_accessed_at)
                    VALUES (?, ?, ?, ?, 0, ?)
                    """,
                    [team_id, title, json.dumps(data, ensure_ascii=False), now, now],
                )
            except duckdb.ConstraintException as e:
                logger.info(f"Team id {team_id} already exists, a new one is needed")
                raise TeamIdCollision(team_id) from e

    def get_team(self, team_id: str) -> Optional[TeamRecord]:
        """Get a team by id, or None if there is no such team."""
        with self._cursor("load team") as cursor:
            row = cursor.execute(
                """
                SELECT id, title, data, created_at, access_count, last_accessed_at
                FROM teams
                WHERE id = ?
                """,
                [team_id],
            ).fetchone()

        if row is None:
            return None

        return TeamRecord(
            id=row[0],
            title=row[1],
            data=json.loads(row[2]),
            created_at=row[3],
            access_count=row[4],
            last_accessed_at=row[5],
        )

    def record_access(self, team_id: str) -> None:
        """Bump a team's access counter and last access time."""
        with self._cursor("update team access stats") as cursor:
            cursor.execute(
                """
                UPDATE teams
                SET access_count = access_count + 1, last_accessed_at = ?
                WHERE id = ?
                """,
                [datetime.now(), team_id],
            )

    def get_stats(self) -> TeamStats:
        """Aggregate team count, total reads and latest creation time."""
        with self._cursor("read team stats") as cursor:
            total_teams, total_accesses, latest_creation = cursor.execute(
                """
                SELECT
                    COUNT(*),
                    COALESCE(SUM(access_count), 0),
                    MAX(created_at)
                FROM teams
                """
            ).fetchone()

        return TeamStats(
            total_teams=int(total_teams),
            total_accesses=int(total_accesses),
            latest_creation_timestamp=latest_creation,
        )

    def count_teams(self) -> int:
        with self._cursor("count teams") as cursor:
            return cursor.execute("SELECT COUNT(*) FROM teams").fetchone()[0]

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("TeamRepository: Connection closed")
