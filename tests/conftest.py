# -*- coding: utf-8 -*-
"""Shared fixtures for engine and registry tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable

import pytest

from project_timer.engine import CountdownEngine
from project_timer.registry import Project


class FakeScheduler:
    """Records after/after_cancel calls the way a tk root would receive them."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.jobs: dict[str, tuple[int, Callable[[], None]]] = {}
        self.cancelled: list[str] = []

    def after(self, ms: int, func: Callable[[], None]) -> str:
        job = f"after#{next(self._ids)}"
        self.jobs[job] = (ms, func)
        return job

    def after_cancel(self, job: str) -> None:
        self.cancelled.append(job)
        self.jobs.pop(job, None)

    def fire(self) -> None:
        """Run every pending job once, as the event loop would after a second."""
        for job in list(self.jobs):
            _, func = self.jobs.pop(job)
            func()


class SignalRecorder:
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def project_changed(self, project: Project) -> None:
        self.events.append(("changed", project.name))

    def alarm(self) -> None:
        self.events.append(("alarm",))

    def run_complete(self) -> None:
        self.events.append(("complete",))

    def count(self, kind: str) -> int:
        return sum(1 for event in self.events if event[0] == kind)


def _make_project(name: str, seconds: int) -> Project:
    return Project(id=f"id-{name.lower()}", name=name, duration=seconds)


@pytest.fixture
def recorder() -> SignalRecorder:
    return SignalRecorder()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def engine(recorder: SignalRecorder) -> CountdownEngine:
    return CountdownEngine(
        on_project_changed=recorder.project_changed,
        on_alarm=recorder.alarm,
        on_run_complete=recorder.run_complete,
    )


@pytest.fixture
def draft_review() -> list[Project]:
    return [_make_project("Draft", 60), _make_project("Review", 30)]
