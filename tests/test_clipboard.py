"""Tests for clipboard copying."""

import subprocess

from cytheme import clipboard


class TestCopy:
    def test_first_available_command(self, monkeypatch):
        calls = []
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/" + name if name == "xclip" else None)
        monkeypatch.setattr(clipboard.subprocess, "run", lambda cmd, **kw: calls.append((cmd, kw["input"])))
        assert clipboard.copy_to_clipboard("body {}") is True
        assert calls == [(["xclip", "-selection", "clipboard"], "body {}")]

    def test_falls_through_failures(self, monkeypatch):
        calls = []

        def run(cmd, **kw):
            calls.append(cmd[0])
            if cmd[0] == "pbcopy":
                raise subprocess.CalledProcessError(1, cmd)

        monkeypatch.setattr(clipboard.shutil, "which", lambda name: name if name in ("pbcopy", "xsel") else None)
        monkeypatch.setattr(clipboard.subprocess, "run", run)
        assert clipboard.copy_to_clipboard("x") is True
        assert calls == ["pbcopy", "xsel"]

    def test_nothing_installed(self, monkeypatch):
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
        assert clipboard.copy_to_clipboard("x") is False
