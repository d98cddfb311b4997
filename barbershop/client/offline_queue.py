"""
Local queue of bookings made while the API was unreachable.

The queue lives in a JSON file so pending bookings survive restarts. Writes go
through a temporary file and a rename, so a crash mid-write leaves the
previous queue intact.
"""

import json
import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

OFFLINE_STATUS = "Pendente - Offline"

# Fields the client adds locally; never sent to the API
LOCAL_FIELDS = ("id", "status", "createdAt")


class OfflineQueue:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def pending(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError:
            data = None
        if not isinstance(data, list):
            self._set_aside_corrupt()
            return []
        return data

    def add(self, booking: dict[str, Any]) -> dict[str, Any]:
        """Stamp a booking as offline and append it. Returns the stored entry."""
        entry = dict(booking)
        entry["id"] = int(time.time() * 1000)
        entry["status"] = OFFLINE_STATUS
        entry["createdAt"] = datetime.now(timezone.utc).isoformat()

        items = self.pending()
        items.append(entry)
        self._write(items)
        logger.info(f"📱 Booking for {entry.get('date')} {entry.get('time')} saved offline")
        return entry

    def replace(self, items: list[dict[str, Any]]) -> None:
        if items:
            self._write(items)
        else:
            self.clear()

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

    def times_for_date(self, date: str) -> list[str]:
        return [b["time"] for b in self.pending() if b.get("date") == date and b.get("time")]

    def __len__(self) -> int:
        return len(self.pending())

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_suffix(self.path.suffix + ".corrupt")

    def _set_aside_corrupt(self) -> None:
        # Later writes must not overwrite bookings we could not read
        os.replace(self.path, self.corrupt_path)
        logger.error(f"❌ Offline queue at {self.path} is corrupt, moved to {self.corrupt_path}")

    def _write(self, items: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)


def to_api_payload(entry: dict[str, Any]) -> dict[str, Any]:
    """Strip local bookkeeping fields from a queued booking"""
    return {key: value for key, value in entry.items() if key not in LOCAL_FIELDS}
