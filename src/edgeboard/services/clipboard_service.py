"""Clipboard polling service for EdgeBoard.

The service watches the platform clipboard's change counter on a background
thread. Every change carrying non-empty text is classified, inserted into the
:class:`HistoryStore` and, when the panel is visible, pushed to the
:class:`UpdateSink` as a formatted snapshot.
"""

import logging
import threading
from typing import List, Optional

from edgeboard.clipboard import ClipboardBackend, get_clipboard_backend
from edgeboard.config import EdgeBoardConfig
from edgeboard.models.entry import ContentKind
from edgeboard.models.schemas import PublishedEntry
from edgeboard.services.classifier import classify
from edgeboard.services.history import HistoryStore
from edgeboard.services.sink import UpdateSink, build_published_entries

logger = logging.getLogger(__name__)


class ClipboardService:
    """Service that records clipboard changes into a history store."""

    def __init__(
        self,
        backend: Optional[ClipboardBackend] = None,
        store: Optional[HistoryStore] = None,
        sink: Optional[UpdateSink] = None,
        config: Optional[EdgeBoardConfig] = None,
        auto_register: bool = False,
    ) -> None:
        """Initialise the service.

        Args:
            backend: Clipboard adapter; defaults to the one for this platform.
            store: History store; a new one sized from ``config`` by default.
            sink: Optional presentation boundary receiving snapshots.
            config: Limits and intervals, ``EdgeBoardConfig()`` by default.
            auto_register: When ``True`` polling starts immediately.
        """
        self.config = config or EdgeBoardConfig()
        self.store = store if store is not None else HistoryStore(
            max_history=self.config.max_history,
            sensitive_keywords=self.config.sensitive_keywords,
        )
        self.sink = sink
        self._backend = backend or get_clipboard_backend()
        self._last_change_count: Optional[int] = None
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._poll_thread: Optional[threading.Thread] = None
        self._is_running = False
        self.poll_interval = self.config.poll_interval

        if auto_register:
            self.start()

    # ---------------------------------------------------------------------
    # Lifecycle management
    # ---------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._is_running

    def start(self) -> None:
        """Bootstrap from the current clipboard and start background polling."""
        with self._lock:
            if self._is_running:
                logger.debug("ClipboardService already running")
                return

            if self._last_change_count is None:
                self.bootstrap()

            logger.info("Starting ClipboardService polling (interval=%ss)", self.poll_interval)
            self._stop_event.clear()
            self._is_running = True
            self._poll_thread = threading.Thread(target=self._poll_loop, daemon=True)
            self._poll_thread.start()

    def stop(self) -> None:
        """Stop the background polling thread."""
        with self._lock:
            if not self._is_running:
                return

            logger.info("Stopping ClipboardService polling")
            self._is_running = False
            self._stop_event.set()

        # join thread outside the lock
        if self._poll_thread is not None:
            self._poll_thread.join(timeout=1.0)
            self._poll_thread = None

    def run_forever(self, poll_interval: Optional[float] = None) -> None:
        """Run the service in the foreground until stopped or interrupted."""
        try:
            if poll_interval is not None:
                self.poll_interval = poll_interval
            if not self._is_running:
                self.start()

            while not self._stop_event.wait(timeout=self.poll_interval):
                continue
        except KeyboardInterrupt:
            logger.info("ClipboardService interrupted by user")
        finally:
            self.stop()

    # ---------------------------------------------------------------------
    # Change detection
    # ---------------------------------------------------------------------
    def bootstrap(self) -> Optional[str]:
        """Record the starting counter and capture what is already copied.

        The startup capture is stored as TEXT unless ``classify_on_startup``
        is enabled.
        """
        try:
            count, text = self._backend.read()
        except Exception:
            logger.debug("Initial clipboard read failed", exc_info=True)
            self._last_change_count = -1
            return None

        self._last_change_count = count
        if not self._accepts(text):
            return None

        kind = classify(text) if self.config.classify_on_startup else ContentKind.TEXT
        entry_id = self.store.insert(text, kind)
        self.publish_history()
        return entry_id

    def tick(self) -> bool:
        """Run one poll. Returns ``True`` when a new entry was recorded."""
        try:
            count = self._backend.change_count()
            if count == self._last_change_count:
                return False
            text = self._backend.read_text()
        except Exception:
            logger.debug("Clipboard read failed, skipping tick", exc_info=True)
            return False

        self._last_change_count = count
        if not self._accepts(text):
            return False

        kind = classify(text)
        self.store.insert(text, kind)
        logger.info("Clipboard copied: %s", kind.value)
        self.publish_history()
        return True

    def _accepts(self, text: Optional[str]) -> bool:
        if not text:
            return False
        size = len(text.encode("utf-8"))
        if size > self.config.max_content_bytes:
            logger.info("Skipping clipboard content of %d bytes (limit %d)",
                        size, self.config.max_content_bytes)
            return False
        return True

    def _poll_loop(self) -> None:
        """Background polling loop."""
        while not self._stop_event.is_set():
            try:
                self.tick()
            except Exception:
                logger.exception("Error while processing clipboard change")
            self._stop_event.wait(self.poll_interval)

    # ---------------------------------------------------------------------
    # Panel actions
    # ---------------------------------------------------------------------
    def published_snapshot(self, limit: Optional[int] = None) -> List[PublishedEntry]:
        entries = self.store.snapshot(self.config.publish_limit if limit is None else limit)
        return build_published_entries(
            entries,
            text_limit=self.config.preview_text_limit,
            code_limit=self.config.preview_code_limit,
        )

    def publish_history(self) -> None:
        if self.sink is None or not self.sink.visible:
            return
        try:
            self.sink.publish(self.published_snapshot())
        except Exception:
            logger.exception("Update sink failed to publish history")

    def clear_history(self) -> None:
        self.store.clear()
        logger.info("Clipboard history cleared")
        self.publish_history()

    def copy_entry(self, entry_id: str) -> bool:
        """Put a history entry's content back on the system clipboard."""
        entry = self.store.get(entry_id)
        if entry is None:
            return False
        return self._backend.write_text(entry.content)

    def show_panel(self) -> None:
        if self.sink is None:
            return
        self.sink.show()
        self.publish_history()

    def hide_panel(self) -> None:
        if self.sink is not None:
            self.sink.hide()

    # ---------------------------------------------------------------------
    # Context manager helpers
    # ---------------------------------------------------------------------
    def __enter__(self) -> "ClipboardService":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
