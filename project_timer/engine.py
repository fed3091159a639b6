"""
Countdown engine - sequential run through a list of projects.

The engine is UI-agnostic: it owns a single cancellable tick job on a
scheduler that speaks tkinter's ``after``/``after_cancel`` protocol and
reports transitions through plain callbacks.
"""

import logging

logger = logging.getLogger(__name__)

TICK_MS = 1000

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"

FORWARD = "forward"
BACKWARD = "backward"
_STEPS = {FORWARD: 1, BACKWARD: -1}


class CountdownEngine:
    """Drives a run: current index, remaining seconds, pause state"""
    def __init__(self, scheduler=None, on_project_changed=None, on_alarm=None,
                 on_run_complete=None, on_update=None):
        self.scheduler = scheduler
        self.on_project_changed = on_project_changed
        self.on_alarm = on_alarm
        self.on_run_complete = on_run_complete
        self.on_update = on_update

        self.running = False
        self.paused = False
        self.sequence = ()
        self.current_index = None
        self.remaining = 0
        self._job = None

    # ---------- state ----------

    @property
    def state(self):
        if not self.running:
            return IDLE
        return PAUSED if self.paused else RUNNING

    @property
    def active(self):
        return self.running

    @property
    def current_project(self):
        if self.current_index is None:
            return None
        return self.sequence[self.current_index]

    def can_navigate(self, direction):
        if not self.running:
            return False
        target = self.current_index + _STEPS[direction]
        return 0 <= target < len(self.sequence)

    # ---------- operations ----------

    def start(self, sequence, start_index=0):
        """Begins a run at start_index; returns False if nothing to run"""
        sequence = tuple(sequence)
        if not sequence or not 0 <= start_index < len(sequence):
            return False

        self._disarm()
        self.sequence = sequence
        self.running = True
        self.paused = False
        self.current_index = start_index
        self.remaining = sequence[start_index].duration
        logger.info("Run started at %s (%d/%d)",
                    sequence[start_index].name, start_index + 1, len(sequence))

        self._emit(self.on_project_changed, self.current_project)
        self._emit(self.on_update, self.remaining)
        if self.running and not self.paused:
            self._arm()
        return True

    def tick(self):
        """One second elapsed; returns whether the run is still active"""
        if not self.running or self.paused:
            return self.running

        self.remaining = max(0, self.remaining - 1)
        self._emit(self.on_update, self.remaining)
        if self.running and self.remaining == 0:
            self._expire()
        return self.running

    def toggle_pause(self):
        if not self.running:
            return False
        self.paused = not self.paused
        if self.paused:
            self._disarm()
        else:
            self._arm()
        logger.info("Run %s", "paused" if self.paused else "resumed")
        return True

    def navigate(self, direction):
        """Moves one project forward or backward; no alarm is played"""
        if direction not in _STEPS:
            raise ValueError(f"Unknown direction: {direction!r}")
        if not self.can_navigate(direction):
            return False

        self.current_index += _STEPS[direction]
        self.remaining = self.current_project.duration
        logger.info("Navigated %s to %s", direction, self.current_project.name)

        self._emit(self.on_project_changed, self.current_project)
        self._emit(self.on_update, self.remaining)
        if not self.paused:
            self._disarm()
            self._arm()
        return True

    def exit(self):
        """Abandons the run without sounding the alarm"""
        if not self.running:
            return False
        logger.info("Run exited at %s", self.current_project.name)
        self._finish()
        return True

    # ---------- internals ----------

    def _expire(self):
        self._emit(self.on_alarm)
        if not self.running:
            return
        if self.current_index < len(self.sequence) - 1:
            self.current_index += 1
            self.remaining = self.current_project.duration
            logger.info("Advanced to %s", self.current_project.name)
            self._emit(self.on_project_changed, self.current_project)
            self._emit(self.on_update, self.remaining)
        else:
            logger.info("Run complete")
            self._finish()

    def _finish(self):
        self._disarm()
        self.running = False
        self.paused = False
        self.current_index = None
        self.remaining = 0
        self.sequence = ()
        self._emit(self.on_run_complete)

    def _on_interval(self):
        self._job = None
        self.tick()
        # A callback may already have started a new run and armed it
        if self.running and not self.paused and self._job is None:
            self._arm()

    def _arm(self):
        if self.scheduler is None or self._job is not None:
            return
        self._job = self.scheduler.after(TICK_MS, self._on_interval)

    def _disarm(self):
        if self._job is None:
            return
        job, self._job = self._job, None
        try:
            self.scheduler.after_cancel(job)
        except Exception:
            logger.exception("Could not cancel tick job %r", job)

    @staticmethod
    def _emit(callback, *args):
        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.exception("Signal handler %r failed", callback)
