"""
Project registry - the ordered list of named projects a run counts down through.
"""

import logging
from dataclasses import dataclass
from uuid import uuid4

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Project:
    """Named unit of work; duration is in seconds"""
    id: str
    name: str
    duration: int

    @property
    def minutes(self):
        return self.duration // 60


def _clean_name(name):
    if not isinstance(name, str):
        return None
    name = name.strip()
    return name or None


def _parse_minutes(value):
    """Positive whole minutes from an int or a typed string, else None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        minutes = value
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            minutes = int(value.strip())
        except ValueError:
            # beyond the interpreter's int digit limit
            return None
    else:
        return None
    return minutes if minutes > 0 else None


class ProjectRegistry:
    """Owns the projects in insertion order"""
    def __init__(self):
        self._projects = []

    def add(self, name, duration_minutes):
        """Appends a project; returns it, or None when the input is invalid"""
        name = _clean_name(name)
        minutes = _parse_minutes(duration_minutes)
        if name is None or minutes is None:
            logger.debug("Ignoring add(%r, %r)", name, duration_minutes)
            return None

        project = Project(id=uuid4().hex, name=name, duration=minutes * 60)
        self._projects.append(project)
        logger.info("Added project %s (%s min)", project.name, minutes)
        return project

    def edit(self, project_id, name, duration_minutes):
        """Replaces name/duration in place, keeping id and position"""
        name = _clean_name(name)
        minutes = _parse_minutes(duration_minutes)
        index = self.index_of(project_id)
        if name is None or minutes is None or index is None:
            logger.debug("Ignoring edit(%r, %r, %r)", project_id, name, duration_minutes)
            return None

        # Projects are immutable so a running snapshot never sees this edit
        project = Project(id=project_id, name=name, duration=minutes * 60)
        self._projects[index] = project
        logger.info("Edited project %s", project_id)
        return project

    def delete(self, project_id):
        index = self.index_of(project_id)
        if index is None:
            return False
        removed = self._projects.pop(index)
        logger.info("Deleted project %s", removed.name)
        return True

    def list(self):
        return tuple(self._projects)

    def get(self, project_id):
        index = self.index_of(project_id)
        return None if index is None else self._projects[index]

    def index_of(self, project_id):
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                return index
        return None

    def total_duration(self):
        return sum(p.duration for p in self._projects)

    def __len__(self):
        return len(self._projects)

    def __iter__(self):
        return iter(tuple(self._projects))
