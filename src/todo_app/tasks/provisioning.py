# src/todo_app/tasks/provisioning.py

"""
Backing-file provisioning for the task store.

The schema is never created with DDL at runtime. Instead the package ships a
pre-built SQLite file (assets/Todo.db) which is copied byte-for-byte into place
on first access. The schema version lives in PRAGMA user_version:

- 0                  -> fresh copy of the template, stamp the current version
- older than current -> destructive upgrade: delete, re-copy, stamp (data is lost)
- newer than current -> SchemaDowngradeError
- equal              -> nothing to do, the file is not touched
"""

from __future__ import annotations

import contextlib
import logging
import shutil
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DB_NAME = "Todo.db"
DB_VERSION = 1


class SchemaDowngradeError(RuntimeError):
    """The backing file was written by a newer schema version than this build supports."""


def default_template_path() -> Path:
    return Path(__file__).resolve().parent.parent / "assets" / DB_NAME


def copy_template_if_missing(db_path: str | Path, template_path: str | Path) -> bool:
    """
    Copy the template to db_path unless db_path already exists.

    Returns True when a copy was made. Failures are logged, not raised: the
    store is then left without a backing file and later opens will fail.
    """
    db_path = Path(db_path)
    template_path = Path(template_path)

    if db_path.exists():
        return False

    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        with template_path.open("rb") as src, db_path.open("wb") as dst:
            shutil.copyfileobj(src, dst)
    except OSError:
        logger.exception("Error copying database template %s -> %s", template_path, db_path)
        with contextlib.suppress(OSError):
            db_path.unlink()
        return False

    logger.info("Database copied successfully to: %s", db_path)
    logger.debug("Database size: %d bytes", db_path.stat().st_size)
    return True


class DatabaseProvisioner:
    """Keeps one backing file in line with the bundled template and schema version."""

    def __init__(
        self,
        db_path: str | Path,
        template_path: str | Path | None = None,
        version: int = DB_VERSION,
    ) -> None:
        if version < 1:
            raise ValueError("version must be >= 1")
        self.db_path = Path(db_path)
        self.template_path = Path(template_path) if template_path else default_template_path()
        self.version = int(version)

    def copy_if_missing(self) -> bool:
        return copy_template_if_missing(self.db_path, self.template_path)

    def ensure_ready(self) -> None:
        self.copy_if_missing()
        if not self.db_path.exists():
            # Copy failed and was logged; opening will surface the error to the caller.
            return

        stored = self._read_version()
        if stored == self.version:
            return

        if stored > self.version:
            raise SchemaDowngradeError(
                f"Can't downgrade database {self.db_path} from version {stored} to {self.version}"
            )

        if stored > 0:
            logger.warning(
                "Schema upgrade %s -> %s: replacing %s with a fresh template (existing tasks are lost)",
                stored,
                self.version,
                self.db_path,
            )
            self._delete_database()
            if not self.copy_if_missing():
                return

        self._write_version(self.version)

    def _read_version(self) -> int:
        conn = sqlite3.connect(str(self.db_path))
        try:
            (value,) = conn.execute("PRAGMA user_version").fetchone()
            return int(value)
        finally:
            conn.close()

    def _write_version(self, version: int) -> None:
        conn = sqlite3.connect(str(self.db_path))
        try:
            # PRAGMA does not accept bound parameters; version is an int we own.
            conn.execute(f"PRAGMA user_version = {int(version)}")
            conn.commit()
        finally:
            conn.close()
        logger.debug("Stamped %s with schema version %s", self.db_path, version)

    def _delete_database(self) -> None:
        for suffix in ("", "-journal", "-wal", "-shm"):
            path = self.db_path.with_name(self.db_path.name + suffix)
            with contextlib.suppress(FileNotFoundError):
                path.unlink()
