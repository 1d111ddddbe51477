from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from edgeboard.config import MAX_HISTORY
from edgeboard.models.entry import ClipboardEntry, ContentKind
from edgeboard.models.schemas import HistoryStats

logger = logging.getLogger(__name__)


class HistoryStore:
    """Bounded clipboard history, most recent entry first.

    Content is unique within the store: re-inserting known content drops the
    old entry and puts a fresh one at the head.
    """

    def __init__(
        self,
        max_history: int = MAX_HISTORY,
        sensitive_keywords: Iterable[str] = (),
    ) -> None:
        if max_history <= 0:
            raise ValueError("max_history must be positive")
        self.max_history = max_history
        self.sensitive_keywords = tuple(sensitive_keywords)
        self._entries: List[ClipboardEntry] = []
        self._lock = threading.RLock()

    def insert(self, content: str, kind: ContentKind) -> Optional[str]:
        if not content:
            logger.debug("Ignoring empty clipboard content")
            return None

        entry = ClipboardEntry.create(
            content, kind, sensitive_keywords=self.sensitive_keywords)

        with self._lock:
            self._entries = [e for e in self._entries if e.content != content]
            self._entries.insert(0, entry)
            if len(self._entries) > self.max_history:
                del self._entries[self.max_history:]
        return entry.id

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def snapshot(self, limit: Optional[int] = None) -> List[ClipboardEntry]:
        with self._lock:
            if limit is None:
                return list(self._entries)
            return self._entries[: max(0, limit)]

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def get(self, entry_id: str) -> Optional[ClipboardEntry]:
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def search(self, query: str) -> List[ClipboardEntry]:
        if not query:
            return []
        needle = query.lower()
        with self._lock:
            return [e for e in self._entries if needle in e.content.lower()]

    def filter_by_kind(self, kind: ContentKind) -> List[ClipboardEntry]:
        with self._lock:
            return [e for e in self._entries if e.kind == kind]

    def stats(self) -> HistoryStats:
        with self._lock:
            entries = list(self._entries)

        by_kind = {kind.value: 0 for kind in ContentKind}
        for entry in entries:
            by_kind[entry.kind.value] += 1

        timestamps = [e.created_at for e in entries]
        return HistoryStats(
            totalItems=len(entries),
            byKind=by_kind,
            totalBytes=sum(e.byte_size for e in entries),
            oldest=min(timestamps) if timestamps else None,
            newest=max(timestamps) if timestamps else None,
        )

    def export_json(self, path: Union[str, Path]) -> Path:
        """Write the whole history, in display order, to ``path`` as JSON."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = [entry.to_dict() for entry in self.snapshot()]
        with target.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
        logger.info("Exported %d clipboard entries to %s", len(payload), target)
        return target
