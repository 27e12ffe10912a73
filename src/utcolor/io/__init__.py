"""Clipboard I/O for encoded color strings."""

from utcolor.io.clipboard import ClipboardManager, ClipboardWriter, copy_bytes

__all__ = ["ClipboardManager", "ClipboardWriter", "copy_bytes"]
