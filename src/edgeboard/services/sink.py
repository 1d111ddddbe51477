"""Boundary between the clipboard core and whatever displays the history.

The core only ever calls :meth:`UpdateSink.publish` and only while the sink
reports itself visible. Visibility lives on the sink instance; there is no
module-level UI state.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from edgeboard.models.entry import ClipboardEntry
from edgeboard.models.schemas import PublishedEntry
from edgeboard.services.preview import render_preview
from edgeboard.utils.formatting import byte_size_label, relative_time

logger = logging.getLogger(__name__)


def build_published_entries(
    entries: Sequence[ClipboardEntry],
    *,
    text_limit: int,
    code_limit: int,
    now: Optional[datetime] = None,
) -> List[PublishedEntry]:
    now = now or datetime.now()
    return [
        PublishedEntry(
            id=entry.id,
            content=entry.content,
            kind=entry.kind.value,
            relativeTime=relative_time(entry.created_at, now),
            byteSizeLabel=byte_size_label(entry.byte_size),
            preview=render_preview(entry, text_limit, code_limit),
            sensitive=entry.sensitive,
        )
        for entry in entries
    ]


class UpdateSink(ABC):

    def __init__(self, visible: bool = True) -> None:
        self.visible = visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    @abstractmethod
    def publish(self, entries: List[PublishedEntry]) -> None:
        pass


class CallbackSink(UpdateSink):

    def __init__(
        self,
        callback: Callable[[List[PublishedEntry]], None],
        visible: bool = True,
    ) -> None:
        super().__init__(visible)
        self._callback = callback

    def publish(self, entries: List[PublishedEntry]) -> None:
        self._callback(entries)


class LoggingSink(UpdateSink):

    def publish(self, entries: List[PublishedEntry]) -> None:
        head = entries[0].kind if entries else "-"
        logger.info("History update: %d entries (latest=%s)", len(entries), head)


class PanelSink(UpdateSink):
    """Keeps the most recent snapshot for the panel API to serve."""

    def __init__(self, visible: bool = False) -> None:
        super().__init__(visible)
        self._lock = threading.Lock()
        self._latest: List[PublishedEntry] = []
        self.publish_count = 0

    def publish(self, entries: List[PublishedEntry]) -> None:
        with self._lock:
            self._latest = list(entries)
            self.publish_count += 1

    @property
    def latest(self) -> List[PublishedEntry]:
        with self._lock:
            return list(self._latest)
