import time
from typing import Optional

import win32clipboard as wc

from edgeboard.clipboard.base import ClipboardBackend


class WindowsClipboard(ClipboardBackend):

    def change_count(self) -> int:
        return int(wc.GetClipboardSequenceNumber())

    def _open(self) -> bool:
        for _ in range(3):
            try:
                wc.OpenClipboard()
                return True
            except Exception:
                time.sleep(0.05)
        return False

    def read_text(self) -> Optional[str]:
        if not self._open():
            return None
        try:
            if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                return None
            return wc.GetClipboardData(wc.CF_UNICODETEXT)
        finally:
            wc.CloseClipboard()

    def _write_text(self, content: str) -> bool:
        if not self._open():
            return False
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, content)
            return True
        finally:
            wc.CloseClipboard()
