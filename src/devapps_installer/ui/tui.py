import threading
from typing import List
from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, DataTable, Static
from textual.message import Message
from textual.worker import Worker
from ..domain.catalog import AppEntry
from ..domain.reports import RunReport
from ..domain.status import OutcomeStatus

class AppProcessed(Message):
    def __init__(self, entry: AppEntry, status: OutcomeStatus):
        super().__init__()
        self.entry = entry
        self.status = status

class RunFinished(Message):
    def __init__(self, report: RunReport | None):
        super().__init__()
        self.report = report

class InstallerTUI(App):
    CSS = """
    #title {content-align: center middle; padding: 1 0}
    #table {height: 1fr; width: 100%}
    #status {padding: 0 1}
    """
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, processor, entries: List[AppEntry], skip_updates: bool = False):
        super().__init__()
        self.processor = processor
        self.entries = entries
        self.skip_updates = skip_updates
        self.report: RunReport | None = None
        self._done = 0
        self._worker: Worker | None = None
        self._stop = threading.Event()
        self._finished = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("DevApps Installer", id="title")
        self.table = DataTable(id="table", cursor_type="row")
        _, _, self._status_col = self.table.add_columns("Name", "Id", "Status")
        yield self.table
        yield Static("", id="status")
        yield Footer()

    def on_mount(self):
        for e in self.entries:
            self.table.add_row(e.name, e.package_id, "Pending", key=e.package_id)
        self.set_status(f"Processing {len(self.entries)} apps…")
        self._worker = self.run_worker(self._run, thread=True, exclusive=True, group="run", name="run")

    def _run(self):
        try:
            self.report = self.processor.run(
                self.entries,
                skip_updates=self.skip_updates,
                on_result=lambda e, s: self.post_message(AppProcessed(e, s)),
                should_stop=self._stop.is_set,
            )
        finally:
            self.post_message(RunFinished(self.report))

    def set_status(self, text: str):
        self.query_one("#status", Static).update(text)

    def on_app_processed(self, msg: AppProcessed):
        self._done += 1
        self.table.update_cell(msg.entry.package_id, self._status_col, msg.status.label)
        self.set_status(f"{self._done}/{len(self.entries)} done")

    async def action_quit(self):
        # installs cannot be interrupted safely; let the current one finish
        if self._finished:
            self.exit()
            return
        self._stop.set()
        self.set_status("Stopping after the current app…")

    def on_run_finished(self, msg: RunFinished):
        self._finished = True
        if self._stop.is_set():
            self.exit()
            return
        rate = msg.report.success_rate() if msg.report else None
        rate_text = "n/a" if rate is None else f"{rate}%"
        self.set_status(f"Finished. Success rate: {rate_text}. Press q to quit.")
