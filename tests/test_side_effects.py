# -*- coding: utf-8 -*-
"""Tests that audio and notification failures stay contained."""

from __future__ import annotations

import numpy as np
import pytest

from project_timer import notify
from project_timer.notify import NotificationManager
from project_timer.sound import SoundManager, tone_samples


class _BrokenSound:
    def play(self) -> None:
        raise RuntimeError("device busy")

    def stop(self) -> None:
        pass


def test_tone_samples_shape_and_fade() -> None:
    samples = tone_samples(440, 0.1, sample_rate=1000, channels=2)
    assert samples.shape == (100, 2)
    assert samples.dtype == np.int16
    assert samples[0, 0] == 0


def test_tone_samples_mono() -> None:
    assert tone_samples(440, 0.1, sample_rate=1000, channels=1).shape == (100,)


def test_disabled_sound_manager_does_nothing() -> None:
    manager = SoundManager(enabled=False)
    assert manager.available is False
    assert manager.play("Chime") is False
    manager.stop()


def test_play_error_is_swallowed() -> None:
    manager = SoundManager(enabled=False)
    manager.available = True
    manager.sounds["Beep"] = _BrokenSound()
    assert manager.play("Beep") is False


def test_unknown_sound_returns_false() -> None:
    manager = SoundManager(enabled=False)
    manager.available = True
    assert manager.play("Kazoo") is False


def test_notification_failure_is_swallowed(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(**kwargs) -> None:
        raise NotImplementedError("no backend")

    monkeypatch.setattr(notify.notification, "notify", fail)
    assert NotificationManager().show("Title", "Body") is False


def test_notification_forwards_to_plyer(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(notify.notification, "notify", lambda **kwargs: calls.append(kwargs))
    assert NotificationManager(app_name="PT").show("Title", "Body") is True
    assert calls[0]["title"] == "Title"
    assert calls[0]["app_name"] == "PT"


def test_disabled_notifications_skip_plyer(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(notify.notification, "notify", lambda **kwargs: calls.append(kwargs))
    assert NotificationManager(enabled=False).show("Title", "Body") is False
    assert calls == []
