"""EdgeBoard clipboard history core."""

from edgeboard.config import EdgeBoardConfig
from edgeboard.models import ClipboardEntry, ContentKind
from edgeboard.services import ClipboardService, HistoryStore, classify, render_preview

__version__ = "0.1.0"

__all__ = [
    "ClipboardEntry",
    "ClipboardService",
    "ContentKind",
    "EdgeBoardConfig",
    "HistoryStore",
    "classify",
    "render_preview",
]
