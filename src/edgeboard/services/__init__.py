"""Service layer for EdgeBoard."""

from .classifier import classify
from .clipboard_service import ClipboardService
from .history import HistoryStore
from .preview import render_preview
from .sink import CallbackSink, LoggingSink, PanelSink, UpdateSink

__all__ = [
    "CallbackSink",
    "ClipboardService",
    "HistoryStore",
    "LoggingSink",
    "PanelSink",
    "UpdateSink",
    "classify",
    "render_preview",
]
