from ..core.colors import *
from ..core.console import Console
from ..domain.catalog import AppEntry
from ..domain.reports import RunReport
from ..domain.status import OutcomeStatus

STATUS_COLORS = {
    OutcomeStatus.SUCCESS: GREEN,
    OutcomeStatus.UPDATED: CYAN,
    OutcomeStatus.ALREADY_LATEST: TEAL,
    OutcomeStatus.SKIPPED: GRAY,
    OutcomeStatus.FAILED: RED,
}

def print_plan(console: Console, entries: list[AppEntry], skip_updates: bool):
    console.header("Applications")
    w = max([len(e.name) for e in entries] + [4])
    for i, e in enumerate(entries, 1):
        print(f"{paint(str(i).rjust(2), ORANGE)}  {paint(e.name.ljust(w), WHITE)}  {paint(e.package_id, GRAY)}")
    if skip_updates:
        console.info("Installed apps will be skipped (no update check).")

def print_summary(console: Console, report: RunReport):
    report.mark_finished()
    console.header("Summary")
    if report.dry_run:
        console.warn("Dry run: winget commands were not executed, so these results are simulated.")
    if not report.total:
        console.warn("No applications were processed.")
    w = max([len(n) for n in report.results] + [4])
    for name, status in report.results.items():
        print(f"  {name.ljust(w)}  {paint(status.label, STATUS_COLORS[status], BOLD)}")
    print()
    for status, n in report.counts().items():
        print(f"  {paint(status.label.ljust(14), STATUS_COLORS[status])} {n}")
    rate = report.success_rate()
    rate_text = "n/a" if rate is None else f"{rate}%"
    print(f"  {'Total'.ljust(14)} {report.total}")
    print(f"  {'Success rate'.ljust(14)} {paint(rate_text, BOLD)}")
    failed = report.names_with(OutcomeStatus.FAILED)
    if failed:
        console.err(f"Failed: {', '.join(failed)}")
