"""Stored document envelope."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class PersistedRecord(BaseModel):
    id: str
    collection: str
    created_at: datetime  # assigned by the store at write time
    payload: dict[str, Any]
