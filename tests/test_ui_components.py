"""Attachment icons and the platform file launcher"""

import ui_components


class TestOpenWithDefaultApp:
    def test_missing_file_not_launched(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(ui_components.subprocess, "Popen", calls.append)
        assert ui_components.open_with_default_app(str(tmp_path / "gone.txt")) is False
        assert ui_components.open_with_default_app("") is False
        assert calls == []

    def test_linux_uses_xdg_open(self, monkeypatch, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("hi", encoding="utf-8")
        calls = []
        monkeypatch.setattr(ui_components.sys, "platform", "linux")
        monkeypatch.setattr(ui_components.subprocess, "Popen", calls.append)
        assert ui_components.open_with_default_app(str(target)) is True
        assert calls == [["xdg-open", str(target)]]

    def test_macos_uses_open(self, monkeypatch, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("hi", encoding="utf-8")
        calls = []
        monkeypatch.setattr(ui_components.sys, "platform", "darwin")
        monkeypatch.setattr(ui_components.subprocess, "Popen", calls.append)
        assert ui_components.open_with_default_app(str(target)) is True
        assert calls == [["open", str(target)]]

    def test_launcher_failure_reported(self, monkeypatch, tmp_path):
        target = tmp_path / "notes.txt"
        target.write_text("hi", encoding="utf-8")

        def broken(args):
            raise FileNotFoundError("xdg-open")

        monkeypatch.setattr(ui_components.sys, "platform", "linux")
        monkeypatch.setattr(ui_components.subprocess, "Popen", broken)
        assert ui_components.open_with_default_app(str(target)) is False


class TestFileIcon:
    def test_unknown_extension_gives_empty_icon(self, qapp):
        assert ui_components.file_icon("pdf").isNull()
        assert ui_components.file_icon("").isNull()
