import sys
from pathlib import Path
from typing import Optional

import pytest

# Make src importable
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from edgeboard.clipboard.base import ClipboardBackend  # noqa: E402
from edgeboard.config import EdgeBoardConfig  # noqa: E402
from edgeboard.services.history import HistoryStore  # noqa: E402
from edgeboard.services.sink import CallbackSink  # noqa: E402


class FakeClipboard(ClipboardBackend):
    """In-memory clipboard with a manually driven change counter."""

    def __init__(self, count: int = 0, text: Optional[str] = None) -> None:
        self.count = count
        self.text = text
        self.fail = False
        self.writes = []

    def copy(self, text: Optional[str]) -> None:
        self.text = text
        self.count += 1

    def change_count(self) -> int:
        if self.fail:
            raise RuntimeError("pasteboard unavailable")
        return self.count

    def read_text(self) -> Optional[str]:
        if self.fail:
            raise RuntimeError("no text representation")
        return self.text

    def _write_text(self, content: str) -> bool:
        self.writes.append(content)
        self.copy(content)
        return True


class RecordingSink(CallbackSink):

    def __init__(self, visible: bool = True) -> None:
        self.published = []
        super().__init__(self.published.append, visible=visible)


@pytest.fixture
def clipboard():
    return FakeClipboard(count=5)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def store():
    return HistoryStore()


@pytest.fixture
def config():
    return EdgeBoardConfig()
