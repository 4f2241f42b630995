"""Tests for clipboard tool selection."""

from __future__ import annotations

import subprocess
from typing import Any

import pytest

from kubeviz.domain.errors import ClipboardUnavailableError
from kubeviz.infrastructure import clipboard


class TestCopyToClipboard:
    def test_uses_first_available_tool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, Any]] = []

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            calls.append({"cmd": cmd, **kwargs})
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(
            clipboard.shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None
        )
        monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

        assert clipboard.copy_to_clipboard("hello") == "xclip"
        assert calls[0]["cmd"] == ["xclip", "-selection", "clipboard"]
        assert calls[0]["input"] == "hello"

    def test_failing_tool_falls_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            if cmd[0] == "wl-copy":
                raise subprocess.CalledProcessError(1, cmd)
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(
            clipboard.shutil,
            "which",
            lambda name: f"/usr/bin/{name}" if name in ("wl-copy", "xsel") else None,
        )
        monkeypatch.setattr(clipboard.subprocess, "run", fake_run)

        assert clipboard.copy_to_clipboard("hello") == "xsel"

    def test_no_tool_available(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
        with pytest.raises(ClipboardUnavailableError):
            clipboard.copy_to_clipboard("hello")
