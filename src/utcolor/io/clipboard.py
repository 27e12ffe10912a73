"""System clipboard export for encoded color strings.

The encoded stream contains bytes in 0x80-0xFF that must reach the
game client unchanged. On Windows the bytes are written directly as
CF_TEXT, which the default text APIs would otherwise transcode. Other
platforms go through pyperclip, which may not preserve raw bytes.

Export is best-effort: failures are logged and reported as False,
never raised.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol

import pyperclip

from utcolor.core.constants import TEXT_ENCODING

logger = logging.getLogger(__name__)

CF_TEXT = 1
GMEM_MOVEABLE = 0x0002


class ClipboardWriter(Protocol):
    """Host capability that writes raw bytes to a clipboard."""

    def __call__(self, data: bytes) -> None:
        ...


class ClipboardManager:
    """Chooses the raw-bytes path where the platform has one."""

    @staticmethod
    def copy_bytes(data: bytes) -> None:
        """Copy raw bytes to the system clipboard.

        Raises:
            OSError: if the Windows clipboard cannot be written
            pyperclip.PyperclipException: if no clipboard mechanism exists
        """
        if sys.platform == 'win32':
            logger.debug("Clipboard: raw CF_TEXT path (%d bytes)", len(data))
            ClipboardManager._copy_windows(data)
        else:
            logger.debug("Clipboard: pyperclip text path (%d bytes)", len(data))
            ClipboardManager._copy_text(data)

    @staticmethod
    def _copy_windows(data: bytes) -> None:
        """Write bytes as CF_TEXT so the code page is not applied."""
        import ctypes
        from ctypes import wintypes

        user32 = ctypes.WinDLL("user32", use_last_error=True)
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        user32.OpenClipboard.argtypes = [wintypes.HWND]
        user32.SetClipboardData.argtypes = [wintypes.UINT, wintypes.HANDLE]
        user32.SetClipboardData.restype = wintypes.HANDLE
        kernel32.GlobalAlloc.argtypes = [wintypes.UINT, ctypes.c_size_t]
        kernel32.GlobalAlloc.restype = wintypes.HGLOBAL
        kernel32.GlobalLock.argtypes = [wintypes.HGLOBAL]
        kernel32.GlobalLock.restype = wintypes.LPVOID
        kernel32.GlobalUnlock.argtypes = [wintypes.HGLOBAL]
        kernel32.GlobalFree.argtypes = [wintypes.HGLOBAL]
        kernel32.GlobalFree.restype = wintypes.HGLOBAL

        if not user32.OpenClipboard(None):
            raise OSError(ctypes.get_last_error(), "OpenClipboard failed")
        try:
            user32.EmptyClipboard()
            payload = data + b"\0"
            handle = kernel32.GlobalAlloc(GMEM_MOVEABLE, len(payload))
            if not handle:
                raise OSError(ctypes.get_last_error(), "GlobalAlloc failed")
            dst = kernel32.GlobalLock(handle)
            if not dst:
                kernel32.GlobalFree(handle)
                raise OSError(ctypes.get_last_error(), "GlobalLock failed")
            ctypes.memmove(dst, payload, len(payload))
            kernel32.GlobalUnlock(handle)
            # The clipboard owns the handle only once SetClipboardData succeeds
            if not user32.SetClipboardData(CF_TEXT, handle):
                kernel32.GlobalFree(handle)
                raise OSError(ctypes.get_last_error(), "SetClipboardData failed")
        finally:
            user32.CloseClipboard()

    @staticmethod
    def _copy_text(data: bytes) -> None:
        """Lossy fallback through the platform text clipboard."""
        pyperclip.copy(data.decode(TEXT_ENCODING))


def copy_bytes(data: bytes, writer: ClipboardWriter | None = None) -> bool:
    """
    Best-effort copy of encoded bytes to the clipboard.

    Args:
        data: Encoded color string
        writer: Host-provided raw-bytes writer; the system clipboard
            is used when omitted

    Returns:
        True if the write went through, False if it failed
    """
    write = writer or ClipboardManager.copy_bytes
    try:
        write(data)
    except (OSError, pyperclip.PyperclipException) as exc:
        logger.warning("Clipboard export failed: %s", exc)
        return False
    logger.debug("Copied %d bytes to clipboard", len(data))
    return True
