"""LogStore: SQLite-backed storage for region-partitioned log records.

Schema (created on first open if absent):

    logs(region TEXT NOT NULL, time INTEGER NOT NULL, message TEXT NOT NULL)

There is no primary key and no index; identical rows may be stored more than
once. Rows are never updated or deleted.

The store exclusively owns the sqlite3 connection. Every sqlite failure is
wrapped in a StorageError and raised to the caller, which decides whether it
is fatal (startup) or request-scoped (query time).
"""

import logging
import sqlite3
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from exceptions.exceptions import StorageError
from ..models.log_models import LogEntry


logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """CREATE TABLE IF NOT EXISTS logs (
    region  TEXT NOT NULL,
    time    INTEGER NOT NULL,
    message TEXT NOT NULL
)"""
COUNT_LOGS_SQL = "SELECT COUNT(*) FROM logs"
INSERT_LOG_SQL = "INSERT INTO logs (region, time, message) VALUES (?, ?, ?)"
SELECT_LOGS_SQL = (
    "SELECT region, time, message FROM logs "
    "WHERE region = ? AND time BETWEEN ? AND ?"
)
STATS_SQL = "SELECT region, COUNT(*) AS count FROM logs GROUP BY region"


class LogStore:
    """Append-only log storage over a single shared SQLite connection.

    Parameters
    ----------
    db_path:
        Path of the SQLite database file, or ":memory:".
    timeout:
        Seconds a statement waits on a locked database before failing.

    The connection is created with ``check_same_thread=False`` so that the
    HTTP worker threads can share it; SQLite's own locking serialises
    writers against readers.
    """

    def __init__(self, db_path: Union[str, Path] = "./logs.db", timeout: float = 5.0) -> None:
        self.db_path = str(db_path)
        try:
            self._conn = sqlite3.connect(
                self.db_path,
                timeout=timeout,
                check_same_thread=False,
                isolation_level=None,  # explicit BEGIN/COMMIT in insert_many
            )
        except sqlite3.Error as e:
            raise StorageError("open database", e) from e

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create_schema_if_absent(self) -> None:
        try:
            self._conn.execute(CREATE_TABLE_SQL)
        except sqlite3.Error as e:
            raise StorageError("create table", e) from e

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "LogStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Write API
    # ------------------------------------------------------------------

    def insert(self, region: str, time: int, message: str) -> None:
        try:
            self._conn.execute(INSERT_LOG_SQL, (region, time, message))
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError("insert log", e) from e

    def insert_many(self, region: str, records: Iterable[Tuple[int, str]]) -> int:
        """Insert ``(time, message)`` pairs for one region in one transaction.

        Either every row is committed or, on failure, none are.
        Returns the number of rows inserted.
        """
        rows = [(region, time, message) for time, message in records]
        try:
            self._conn.execute("BEGIN")
        except sqlite3.Error as e:
            raise StorageError("begin transaction", e) from e

        try:
            self._conn.executemany(INSERT_LOG_SQL, rows)
            self._conn.execute("COMMIT")
        except (sqlite3.Error, OverflowError) as e:
            try:
                self._conn.execute("ROLLBACK")
            except sqlite3.Error:
                logger.warning("[STORE] Rollback failed after: %s", e)
            raise StorageError("insert logs", e) from e

        return len(rows)

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def count(self) -> int:
        try:
            (total,) = self._conn.execute(COUNT_LOGS_SQL).fetchone()
        except sqlite3.Error as e:
            raise StorageError("count logs", e) from e
        return total

    def query(self, region: str, start: int, end: int) -> List[LogEntry]:
        """Return every entry of ``region`` with ``start <= time <= end``.

        Region matching is exact and case-sensitive. No ordering is applied.
        """
        try:
            rows = self._conn.execute(SELECT_LOGS_SQL, (region, start, end)).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError("fetch logs", e) from e
        return [LogEntry(region=r, time=t, message=m) for r, t, m in rows]

    def stats(self) -> Dict[str, int]:
        """Row count per region present in the store."""
        try:
            rows = self._conn.execute(STATS_SQL).fetchall()
        except sqlite3.Error as e:
            raise StorageError("get stats", e) from e
        return {region: count for region, count in rows}
