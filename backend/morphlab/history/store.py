"""JSON-file record of successful transformations.

Items are kept newest-first. There is no schema versioning: the file is a
plain JSON list of HistoryItem dicts.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path

from morphlab.svg.download import now_millis

logger = logging.getLogger(__name__)

_HISTORY_FILENAME = "morphlab_history.json"


@dataclass
class HistoryItem:
    """One completed transformation."""

    id: str
    original_svg: str
    action: str
    result_svg: str
    timestamp_ms: int = 0

    @classmethod
    def create(cls, original_svg: str, action: str, result_svg: str) -> HistoryItem:
        return cls(
            id=str(uuid.uuid4()),
            original_svg=original_svg,
            action=action,
            result_svg=result_svg,
            timestamp_ms=now_millis(),
        )


class HistoryStore:
    """Ordered, id-keyed store of HistoryItems backed by a single JSON file."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.history_file = self.data_dir / _HISTORY_FILENAME

    def get_all(self) -> list[HistoryItem]:
        """All items, newest first."""
        return self._load()

    def get(self, item_id: str) -> HistoryItem | None:
        for item in self._load():
            if item.id == item_id:
                return item
        return None

    def add(self, item: HistoryItem) -> None:
        items = self._load()
        items.insert(0, item)
        self._save(items)
        logger.info("Added history item %s (%s)", item.id, item.action)

    def delete_by_id(self, item_id: str) -> bool:
        items = self._load()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            return False
        self._save(remaining)
        logger.info("Deleted history item %s", item_id)
        return True

    def clear_all(self) -> None:
        if self.history_file.exists():
            self.history_file.unlink()
        logger.info("Cleared history")

    def _load(self) -> list[HistoryItem]:
        if not self.history_file.exists():
            return []
        with open(self.history_file, encoding="utf-8") as f:
            data = json.load(f)
        return [HistoryItem(**d) for d in data]

    def _save(self, items: list[HistoryItem]) -> None:
        with open(self.history_file, "w", encoding="utf-8") as f:
            json.dump([asdict(item) for item in items], f, indent=2, ensure_ascii=False)


# Singleton
_store: HistoryStore | None = None


def get_history_store() -> HistoryStore:
    """Get or create the global HistoryStore singleton."""
    global _store
    if _store is None:
        from morphlab.config import settings

        _store = HistoryStore(settings.history_dir)
    return _store
