"""Tests for settings.py: TOML tool settings."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import debug_trace
import settings
from settings import AppSettings, SettingsManager


class TestSettingsManager:
    def test_defaults_without_file(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        assert manager.settings == AppSettings()
        assert manager.settings.render.wrapper_class == "reword-wrapper"
        assert manager.settings.export.extension == "yaml"

    def test_save_and_load(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings.render.target_class = "my-target"
        manager.settings.export.directory = str(tmp_path / "exports")
        manager.save()

        reloaded = SettingsManager(config_dir=tmp_path)
        assert reloaded.settings.render.target_class == "my-target"
        assert reloaded.get_export_dir() == tmp_path / "exports"

    def test_partial_file(self, tmp_path):
        (tmp_path / "settings.toml").write_text('[render]\nhover_border_color = "red"\n', encoding="utf-8")
        manager = SettingsManager(config_dir=tmp_path)
        assert manager.settings.render.hover_border_color == "red"
        assert manager.settings.render.wrapper_class == "reword-wrapper"
        assert manager.settings.debug.trace is False

    def test_corrupt_file_gives_defaults(self, tmp_path):
        (tmp_path / "settings.toml").write_text("render = [unclosed", encoding="utf-8")
        assert SettingsManager(config_dir=tmp_path).settings == AppSettings()

    def test_wrong_shape_gives_defaults(self, tmp_path):
        (tmp_path / "settings.toml").write_text('render = "oops"\n', encoding="utf-8")
        assert SettingsManager(config_dir=tmp_path).settings == AppSettings()

    def test_ensure_file_complete(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.ensure_file_complete()
        text = manager.get_settings_path().read_text(encoding="utf-8")
        assert "[render]" in text
        assert "[export]" in text
        assert "[debug]" in text

    def test_paths(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path, data_dir=tmp_path / "data")
        assert manager.get_settings_path() == tmp_path / "settings.toml"
        assert manager.get_store_path() == tmp_path / "data" / "live_settings.json"
        assert manager.get_export_dir() == Path.home() / "Downloads"

    def test_apply_debug(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings.debug.trace = True
        manager.settings.debug.log_file = str(tmp_path / "trace.log")
        try:
            manager.apply_debug()
            assert debug_trace.DEBUG_TRACE is True
            debug_trace.trace("hello", "TEST")
            debug_trace.close_log()
            assert "[TEST] hello" in (tmp_path / "trace.log").read_text(encoding="utf-8")
        finally:
            debug_trace.configure(False)


class TestTrace:
    def test_render_lines_need_their_own_switch(self, capsys):
        try:
            debug_trace.configure(True, trace_render=False)
            debug_trace.trace("skipped", "RENDER")
            debug_trace.trace("kept", "IMPORT")
        finally:
            debug_trace.configure(False)
        err = capsys.readouterr().err
        assert "skipped" not in err
        assert "[IMPORT] kept" in err

    def test_disabled_by_default(self, capsys):
        debug_trace.trace("quiet", "IMPORT")
        assert capsys.readouterr().err == ""


class TestSingleton:
    def test_get_settings_is_shared(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "_settings_manager", None)
        monkeypatch.setattr(settings.platformdirs, "user_config_dir", lambda name: str(tmp_path / name))
        first = settings.get_settings()
        assert first is settings.get_settings()
        assert first.get_settings_path() == tmp_path / "reword" / "settings.toml"


class TestTraceCall:
    def test_enter_leave_lines(self, capsys):
        @debug_trace.trace_call("EXPORT")
        def build():
            return 3

        try:
            debug_trace.configure(True)
            assert build() == 3
        finally:
            debug_trace.configure(False)
        err = capsys.readouterr().err
        assert "[EXPORT] enter " in err
        assert "[EXPORT] leave " in err
        assert " ms)" in err

    def test_failure_is_traced_and_raised(self, capsys):
        @debug_trace.trace_call("IMPORT")
        def fail():
            raise ValueError("bad")

        try:
            debug_trace.configure(True)
            with pytest.raises(ValueError):
                fail()
        finally:
            debug_trace.configure(False)
        assert "failed with ValueError: bad" in capsys.readouterr().err

    def test_silent_when_disabled(self, capsys):
        @debug_trace.trace_call("IMPORT")
        def ok():
            return 1

        assert ok() == 1
        assert capsys.readouterr().err == ""
