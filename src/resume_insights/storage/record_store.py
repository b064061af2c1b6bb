"""SQLite-backed append-only document store for analysis and generation results."""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from resume_insights.errors import PersistenceError
from resume_insights.models.record import PersistedRecord

logger = logging.getLogger(__name__)

ANALYSES = "resume_analyses"
GENERATIONS = "generated_resumes"
COLLECTIONS = (ANALYSES, GENERATIONS)


class RecordStore:
    """Document store with one table keyed by collection name, WAL mode."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    id TEXT PRIMARY KEY,
                    collection TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    payload TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_records_collection "
                "ON records (collection, created_at)"
            )

    async def add(self, collection: str, payload: dict[str, Any]) -> str | None:
        """Insert a document and return its id, or None if the write failed.

        Never raises: the caller decides how to surface a missing id.
        """
        try:
            record_id = await asyncio.to_thread(self._insert, collection, payload)
        except PersistenceError as exc:
            logger.error("Error saving record to %s: %s", collection, exc.message, exc_info=True)
            return None
        logger.info("Record saved to %s with ID: %s", collection, record_id)
        return record_id

    async def save_analysis(self, payload: dict[str, Any]) -> str | None:
        return await self.add(ANALYSES, payload)

    async def save_generated_resume(self, payload: dict[str, Any]) -> str | None:
        return await self.add(GENERATIONS, payload)

    def _insert(self, collection: str, payload: dict[str, Any]) -> str:
        if collection not in COLLECTIONS:
            raise PersistenceError(f"Unknown collection: {collection}")
        record_id = str(uuid.uuid4())
        created_at = datetime.now(timezone.utc).isoformat()
        try:
            body = json.dumps(payload, ensure_ascii=False)
            with self._connect() as conn:
                conn.execute(
                    "INSERT INTO records (id, collection, created_at, payload) VALUES (?, ?, ?, ?)",
                    (record_id, collection, created_at, body),
                )
        except (sqlite3.Error, OSError, TypeError, ValueError) as exc:
            raise PersistenceError(str(exc)) from exc
        return record_id

    def get(self, collection: str, record_id: str) -> PersistedRecord | None:
        """Fetch one record by id."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, collection, created_at, payload FROM records "
                "WHERE collection = ? AND id = ?",
                (collection, record_id),
            ).fetchone()
        return self._row_to_record(row) if row is not None else None

    def list_records(self, collection: str, limit: int = 20) -> list[PersistedRecord]:
        """Most recent records first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, collection, created_at, payload FROM records "
                "WHERE collection = ? ORDER BY created_at DESC, rowid DESC LIMIT ?",
                (collection, limit),
            ).fetchall()
        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: tuple) -> PersistedRecord:
        return PersistedRecord(
            id=row[0],
            collection=row[1],
            created_at=datetime.fromisoformat(row[2]),
            payload=json.loads(row[3]),
        )
