"""Tests for clipboard export paths."""

import ctypes
import logging
import sys

import pyperclip
import pytest

from utcolor.io.clipboard import ClipboardManager, copy_bytes

from helpers import GRADIENT_ABC, RecordingWriter


@pytest.fixture
def pasted(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace pyperclip.copy and collect what it receives."""
    copied: list[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied


class TestCopyBytes:
    """Tests for copy_bytes."""

    def test_host_writer_gets_raw_bytes(self, recording_writer: RecordingWriter) -> None:
        assert copy_bytes(GRADIENT_ABC, recording_writer) is True
        assert recording_writer.calls == [GRADIENT_ABC]

    def test_text_fallback(self, monkeypatch: pytest.MonkeyPatch, pasted: list[str]) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        assert copy_bytes(b'\x1b\xff\x01\x01a') is True
        assert pasted == ["\x1b\xff\x01\x01a"]

    def test_windows_uses_raw_path(self, monkeypatch: pytest.MonkeyPatch, pasted: list[str]) -> None:
        written: list[bytes] = []
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setattr(ClipboardManager, "_copy_windows", staticmethod(written.append))
        assert copy_bytes(GRADIENT_ABC) is True
        assert written == [GRADIENT_ABC]
        assert pasted == []

    def test_pyperclip_failure_is_swallowed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_clipboard(text: str) -> None:
            raise pyperclip.PyperclipException("no copy mechanism")

        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(pyperclip, "copy", no_clipboard)
        assert copy_bytes(GRADIENT_ABC) is False

    def test_windows_failure_is_swallowed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def cannot_open(data: bytes) -> None:
            raise OSError(5, "OpenClipboard failed")

        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setattr(ClipboardManager, "_copy_windows", staticmethod(cannot_open))
        assert copy_bytes(GRADIENT_ABC) is False

    def test_logs_text_path(
        self, monkeypatch: pytest.MonkeyPatch, pasted: list[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="utcolor.io.clipboard")
        monkeypatch.setattr(sys, "platform", "linux")
        copy_bytes(GRADIENT_ABC)
        assert "pyperclip text path (15 bytes)" in caplog.text

    def test_logs_raw_path(self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="utcolor.io.clipboard")
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setattr(ClipboardManager, "_copy_windows", staticmethod(lambda data: None))
        copy_bytes(GRADIENT_ABC)
        assert "raw CF_TEXT path (15 bytes)" in caplog.text


class FakeFunction:
    """Stand-in for a foreign function; accepts argtypes/restype."""

    def __init__(self, name: str, calls: list, result: object) -> None:
        self.name = name
        self.calls = calls
        self.result = result

    def __call__(self, *args: object) -> object:
        self.calls.append((self.name, args))
        return self.result


class FakeDLL:
    """Win32 DLL double returning canned results per function name."""

    def __init__(self, calls: list, results: dict) -> None:
        self._calls = calls
        self._results = results

    def __getattr__(self, name: str) -> FakeFunction:
        func = FakeFunction(name, self._calls, self._results.get(name, 1))
        setattr(self, name, func)
        return func


class TestWindowsClipboard:
    """Tests for the raw CF_TEXT writer against a fake Win32 API."""

    HANDLE = 0x1234

    @pytest.fixture
    def win32(self, monkeypatch: pytest.MonkeyPatch):
        """Install fake user32/kernel32 and return (calls, results)."""
        calls: list = []
        memory = ctypes.create_string_buffer(64)
        results = {
            "GlobalAlloc": self.HANDLE,
            "GlobalLock": ctypes.addressof(memory),
        }
        dlls = {"user32": FakeDLL(calls, results), "kernel32": FakeDLL(calls, results)}
        monkeypatch.setattr(ctypes, "WinDLL", lambda name, **kwargs: dlls[name], raising=False)
        monkeypatch.setattr(ctypes, "get_last_error", lambda: 5, raising=False)
        return calls, results, memory

    def test_writes_terminated_bytes(self, win32) -> None:
        calls, results, memory = win32
        ClipboardManager._copy_windows(b"\x1b\xff\x01\x01a")
        assert memory.raw[:6] == b"\x1b\xff\x01\x01a\0"
        names = [name for name, _ in calls]
        assert ("SetClipboardData", (1, self.HANDLE)) in calls
        assert "GlobalFree" not in names
        assert names[-1] == "CloseClipboard"

    def test_set_data_failure_frees_handle(self, win32) -> None:
        calls, results, _ = win32
        results["SetClipboardData"] = 0
        with pytest.raises(OSError, match="SetClipboardData failed"):
            ClipboardManager._copy_windows(b"abc")
        assert ("GlobalFree", (self.HANDLE,)) in calls
        assert calls[-1][0] == "CloseClipboard"

    def test_lock_failure_frees_handle(self, win32) -> None:
        calls, results, _ = win32
        results["GlobalLock"] = 0
        with pytest.raises(OSError, match="GlobalLock failed"):
            ClipboardManager._copy_windows(b"abc")
        assert ("GlobalFree", (self.HANDLE,)) in calls
        assert calls[-1][0] == "CloseClipboard"

    def test_open_failure_does_not_close(self, win32) -> None:
        calls, results, _ = win32
        results["OpenClipboard"] = 0
        with pytest.raises(OSError, match="OpenClipboard failed"):
            ClipboardManager._copy_windows(b"abc")
        assert [name for name, _ in calls] == ["OpenClipboard"]
