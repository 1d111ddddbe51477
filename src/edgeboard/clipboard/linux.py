import hashlib
import os
import shutil
import subprocess
from typing import List, Optional

from edgeboard.clipboard.base import ClipboardBackend


class LinuxClipboard(ClipboardBackend):
    """Clipboard via ``wl-paste``/``xclip``.

    Neither tool exposes a change counter, so one is synthesized: every read
    whose content hash differs from the previous read bumps the counter.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._last_hash: Optional[str] = None
        self._last_text: Optional[str] = None

    def change_count(self) -> int:
        text = self._read_raw()
        if text is None:
            # failed or unavailable read: not a change
            return self._counter
        digest = hashlib.md5(text.encode("utf-8")).hexdigest()
        if digest != self._last_hash:
            self._last_hash = digest
            self._counter += 1
        self._last_text = text
        return self._counter

    def read_text(self) -> Optional[str]:
        return self._last_text

    def _paste_command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste"):
            return ["wl-paste", "--no-newline"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard", "-o"]
        return None

    def _copy_command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
            return ["wl-copy"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        return None

    def _read_raw(self) -> Optional[str]:
        command = self._paste_command()
        if command is None:
            return None
        data = self._run_command(command, timeout=1.5)
        if data is None:
            return None
        return data.decode("utf-8", errors="ignore")

    def _run_command(self, command: List[str], timeout: float) -> Optional[bytes]:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=timeout,
            )
            return result.stdout
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return None

    def _write_text(self, content: str) -> bool:
        command = self._copy_command()
        if command is None:
            return False
        subprocess.run(
            command,
            input=content.encode("utf-8"),
            check=True,
            timeout=2.0,
        )
        return True
