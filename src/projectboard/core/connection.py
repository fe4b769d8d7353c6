"""SQLite connection handling for the project store."""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from projectboard.core.errors import StoreError

logger = logging.getLogger(__name__)

STORE_PRAGMAS = (
    "PRAGMA journal_mode = WAL",
    "PRAGMA synchronous = NORMAL",
)


class DatabaseConnection:
    """A single connection to the project store.

    The file (and its directory) is created on first open. Rows come back as
    ``sqlite3.Row`` so they convert straight into records. A file that
    cannot be opened is reported as StoreError; statement errors are left
    to the caller, which knows which operation failed.
    """

    def __init__(self, path: Path):
        """Open the store.

        Args:
            path: Path to SQLite database file

        Raises:
            StoreError: If the file cannot be created or opened
        """
        self.path = Path(path)
        self._conn: Optional[sqlite3.Connection] = self._open()

    def _open(self) -> sqlite3.Connection:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.path))
        except (OSError, sqlite3.Error) as e:
            logger.error(f"Could not open database at {self.path}: {e}")
            raise StoreError("Database error") from e

        try:
            for pragma in STORE_PRAGMAS:
                conn.execute(pragma)
        except sqlite3.Error as e:
            conn.close()
            logger.error(f"Could not configure database at {self.path}: {e}")
            raise StoreError("Database error") from e

        conn.row_factory = sqlite3.Row
        return conn

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Connection is closed")
        return self._conn

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run one statement with positional parameters."""
        return self.connection.execute(sql, params)

    def fetch_one(self, sql: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        return self.execute(sql, params).fetchone()

    def fetch_all(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        return self.execute(sql, params).fetchall()

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        if self._conn is not None:
            self._conn.rollback()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
