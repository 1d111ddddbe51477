from abc import ABC, abstractmethod
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class ClipboardBackend(ABC):
    """Platform clipboard seen as a ``(change_count, text)`` pair."""

    @abstractmethod
    def change_count(self) -> int:
        pass

    @abstractmethod
    def read_text(self) -> Optional[str]:
        pass

    @abstractmethod
    def _write_text(self, content: str) -> bool:
        pass

    def read(self) -> Tuple[int, Optional[str]]:
        return self.change_count(), self.read_text()

    def write_text(self, content: str) -> bool:
        try:
            return self._write_text(content)
        except Exception:
            logger.exception("Failed to write clipboard text")
            return False
