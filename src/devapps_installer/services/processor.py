import time
from typing import Callable, Sequence
from ..core.console import Console
from ..domain.catalog import AppEntry
from ..domain.reports import RunReport
from ..domain.status import OutcomeStatus

class AppProcessor:
    """
    Walks the app list one entry at a time:

        not installed            -> install  -> Success | Failed
        installed, skip updates  -> Skipped
        installed, update found  -> upgrade  -> Updated | Failed
        installed, up to date    -> AlreadyLatest
    """

    def __init__(self, console: Console, winget, pause_seconds: float = 2.0, sleep: Callable[[float], None] = time.sleep):
        self.console = console
        self.winget = winget
        self.pause_seconds = max(0.0, float(pause_seconds))
        self.sleep = sleep

    def _apply(self, verb: str, action, entry: AppEntry, ok_status: OutcomeStatus) -> OutcomeStatus:
        self.console.info(f"{verb} {entry.name}…")
        try:
            rc = action(entry.package_id)
        except Exception as e:
            self.console.err(f"{verb} {entry.name} failed: {e}")
            return OutcomeStatus.FAILED
        if rc == 0:
            self.console.ok(f"{entry.name}: {ok_status.label}")
            return ok_status
        self.console.warn(f"{verb} {entry.name} exited with code {rc}")
        return OutcomeStatus.FAILED

    def process(self, entry: AppEntry, skip_updates: bool = False) -> OutcomeStatus:
        self.console.header(f"{entry.name} ({entry.package_id})")
        try:
            if not self.winget.is_installed(entry.package_id):
                return self._apply("Installing", self.winget.install, entry, OutcomeStatus.SUCCESS)
            if skip_updates:
                self.console.info(f"{entry.name} is installed; update check skipped.")
                return OutcomeStatus.SKIPPED
            if not self.winget.has_update(entry.package_id):
                self.console.ok(f"{entry.name} is already the latest version.")
                return OutcomeStatus.ALREADY_LATEST
            return self._apply("Updating", self.winget.upgrade, entry, OutcomeStatus.UPDATED)
        except Exception as e:
            self.console.err(f"{entry.name}: {e}")
            return OutcomeStatus.FAILED

    def run(self, entries: Sequence[AppEntry], skip_updates: bool = False,
            on_result: Callable[[AppEntry, OutcomeStatus], None] | None = None,
            should_stop: Callable[[], bool] | None = None) -> RunReport:
        """
        Process entries in order. should_stop is polled before each entry;
        once it returns True the report holds only the entries already done.
        """
        report = RunReport()
        for i, entry in enumerate(entries):
            if should_stop and should_stop():
                self.console.warn(f"Stopped before {entry.name}; {len(entries) - i} apps not processed.")
                break
            status = self.process(entry, skip_updates=skip_updates)
            report.record(entry, status)
            if on_result:
                on_result(entry, status)
            if i < len(entries) - 1 and self.pause_seconds and not (should_stop and should_stop()):
                self.sleep(self.pause_seconds)
        report.mark_finished()
        return report
