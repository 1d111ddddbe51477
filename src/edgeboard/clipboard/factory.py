import platform
from typing import Type

from edgeboard.clipboard.base import ClipboardBackend


def get_clipboard_class() -> Type[ClipboardBackend]:
    system = platform.system()

    if system == "Darwin":
        from edgeboard.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    elif system == "Windows":
        from edgeboard.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif system == "Linux":
        from edgeboard.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    else:
        raise NotImplementedError(f"Platform '{system}' is not supported")


def get_clipboard_backend() -> ClipboardBackend:
    clipboard_class = get_clipboard_class()
    return clipboard_class()
