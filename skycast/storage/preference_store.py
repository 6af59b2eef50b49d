"""Persisted unit preference and last successful city, with time-based expiry."""

import json
import logging
import sqlite3
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skycast.ingest.staleness import is_record_expired
from skycast.models.common import TemperatureUnit, epoch_millis

logger = logging.getLogger(__name__)

STATE_KEY = "weatherAppState"


class PreferenceRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature_unit: TemperatureUnit = Field(
        default=TemperatureUnit.METRIC, alias="temperatureUnit"
    )
    last_search: str | None = Field(default=None, alias="lastSearch")
    timestamp: int = 0  # epoch millis

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


# --- Raw key/value access ---

def get_item(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM local_storage WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_item(conn: sqlite3.Connection, key: str, value: str) -> None:
    conn.execute(
        "INSERT INTO local_storage (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def remove_item(conn: sqlite3.Connection, key: str) -> None:
    conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
    conn.commit()


# --- Preference store ---

class PreferenceStore:
    """One JSON record under a fixed key. Writes are last-write-wins."""

    def __init__(
        self,
        conn: sqlite3.Connection,
        cache_duration_minutes: float = 30.0,
        key: str = STATE_KEY,
    ):
        self.conn = conn
        self.cache_duration_minutes = cache_duration_minutes
        self.key = key

    def save(
        self,
        unit: TemperatureUnit,
        last_search: str | None,
        now: datetime | None = None,
    ) -> PreferenceRecord:
        record = PreferenceRecord(
            temperature_unit=unit,
            last_search=last_search,
            timestamp=epoch_millis(now),
        )
        try:
            set_item(self.conn, self.key, record.to_json())
            logger.debug("Saved preferences: %s", record.to_json())
        except sqlite3.Error:
            logger.exception("Failed to save preferences")
        return record

    def load(self, now: datetime | None = None) -> PreferenceRecord | None:
        """Return the stored record, or None when absent, expired or unreadable."""
        try:
            raw = get_item(self.conn, self.key)
        except sqlite3.Error:
            logger.exception("Failed to read preferences")
            return None
        if raw is None:
            return None

        try:
            record = PreferenceRecord.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("Discarding unreadable preferences: %s", e)
            return None

        if is_record_expired(record.timestamp, self.cache_duration_minutes, now):
            logger.info("Saved preferences expired, using defaults")
            return None
        return record

    def clear(self) -> None:
        remove_item(self.conn, self.key)
