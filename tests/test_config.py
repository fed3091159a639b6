# -*- coding: utf-8 -*-
"""Tests for settings persistence."""

from __future__ import annotations

import json
from pathlib import Path

from project_timer.config import ConfigManager, default_settings


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = ConfigManager(tmp_path / "missing.json")
    assert config.data == default_settings()


def test_set_persists_to_disk(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "settings.json"
    config = ConfigManager(target)
    config.set("sound", "Bell")

    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert loaded["sound"] == "Bell"
    assert ConfigManager(target).get("sound") == "Bell"


def test_file_values_override_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"notifications": False}), encoding="utf-8")
    config = ConfigManager(target)
    assert config.get("notifications") is False
    assert config.get("sound") == "Chime"


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text("{not json", encoding="utf-8")
    assert ConfigManager(target).data == default_settings()


def test_non_object_file_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text("[1, 2]", encoding="utf-8")
    assert ConfigManager(target).data == default_settings()


def test_get_default_for_unknown_key(tmp_path: Path) -> None:
    assert ConfigManager(tmp_path / "s.json").get("nope", 42) == 42
