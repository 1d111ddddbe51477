from typing import Optional

try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from edgeboard.clipboard.base import ClipboardBackend


class MacOSClipboard(ClipboardBackend):

    def __init__(self) -> None:
        if not HAS_APPKIT:
            raise RuntimeError("pyobjc (AppKit) is required for the macOS clipboard")
        self._pasteboard = NSPasteboard.generalPasteboard()

    def change_count(self) -> int:
        return int(self._pasteboard.changeCount())

    def read_text(self) -> Optional[str]:
        if NSPasteboardTypeString not in (self._pasteboard.types() or []):
            return None
        text = self._pasteboard.stringForType_(NSPasteboardTypeString)
        return str(text) if text is not None else None

    def _write_text(self, content: str) -> bool:
        self._pasteboard.clearContents()
        return bool(self._pasteboard.setString_forType_(content, NSPasteboardTypeString))
