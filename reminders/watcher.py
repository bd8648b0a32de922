"""
Expiry Watcher

Long-running form of the expiry sweep. Runs one sweep at start-up and
then one every poll interval until the process is stopped.

A tick that fires while the previous sweep is still running is skipped,
so two sweeps never overlap.
"""

import signal
import threading
from datetime import datetime, timezone
from typing import Any

from apscheduler.schedulers.blocking import BlockingScheduler
import structlog

from reminders.shared.config import Settings, get_settings
from reminders.shared.logging_config import configure_logging
from reminders.sweep.dispatcher import EmailSender
from reminders.sweep.runner import (
    DueEmployeeSource,
    SweepOutcome,
    build_default_dependencies,
    run_expiry_sweep,
)

log = structlog.get_logger()

JOB_ID = "expiry_sweep"


class ExpiryWatcher:
    """Periodic expiry sweep on an APScheduler interval job."""

    def __init__(
        self,
        directory: DueEmployeeSource,
        sender: EmailSender,
        settings: Settings | None = None,
        *,
        scheduler: BlockingScheduler | None = None,
    ) -> None:
        self.directory = directory
        self.sender = sender
        self.settings = settings or get_settings()
        self.scheduler = scheduler or BlockingScheduler(timezone=self.settings.timezone)
        self._running = threading.Lock()

    @property
    def is_running(self) -> bool:
        """Whether a sweep is in progress right now."""
        return self._running.locked()

    def tick(self) -> SweepOutcome | None:
        """
        Run one sweep unless one is already in progress.

        Never raises: query failures are logged and the next tick runs
        as scheduled.

        Returns:
            The sweep outcome, or None if the tick was skipped
        """
        if not self._running.acquire(blocking=False):
            log.warning("watcher_tick_skipped", reason="sweep_in_progress")
            return None

        try:
            log.info(
                "watcher_tick",
                at=datetime.now(timezone.utc).isoformat(),
            )
            outcome = run_expiry_sweep(
                self.directory,
                self.sender,
                settings=self.settings,
            )
        except Exception as e:
            log.exception("watcher_tick_failed", error=str(e))
            return None
        finally:
            self._running.release()

        if not outcome.succeeded:
            log.error("watcher_sweep_failed", error=outcome.error)
        return outcome

    def schedule(self) -> Any:
        """Register the sweep job; the first run is immediate."""
        return self.scheduler.add_job(
            self.tick,
            trigger="interval",
            seconds=self.settings.poll_interval_seconds,
            id=JOB_ID,
            next_run_time=datetime.now(timezone.utc),
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )

    def start(self) -> None:
        """Schedule the sweep and block until stop() is called."""
        self.schedule()
        log.info(
            "watcher_started",
            interval_seconds=self.settings.poll_interval_seconds,
            window_days=self.settings.window_days,
        )
        self.scheduler.start()

    def stop(self) -> None:
        """Cancel future sweeps. A sweep in progress runs to completion."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
        log.info("watcher_stopped")


def main() -> None:
    """Console entry point: watch for upcoming expirations until stopped."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    directory, sender = build_default_dependencies(settings)
    watcher = ExpiryWatcher(directory, sender, settings)

    def _handle_signal(signum: int, frame: Any) -> None:
        log.info("watcher_signal_received", signal=signal.Signals(signum).name)
        watcher.stop()

    signal.signal(signal.SIGTERM, _handle_signal)
    signal.signal(signal.SIGINT, _handle_signal)

    watcher.start()


if __name__ == "__main__":
    main()
