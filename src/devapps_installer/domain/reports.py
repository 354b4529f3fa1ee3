import json, time
from pathlib import Path
from .catalog import AppEntry
from .status import OutcomeStatus

class RunReport:
    def __init__(self):
        self.started = time.time()
        self.finished = None
        self.results: dict[str, OutcomeStatus] = {}
        self.package_ids: dict[str, str] = {}
        self.dry_run = False

    def record(self, entry: AppEntry, status: OutcomeStatus):
        if entry.name in self.results:
            raise ValueError(f"{entry.name} already has a result")
        self.results[entry.name] = status
        self.package_ids[entry.name] = entry.package_id

    def mark_finished(self):
        if not self.finished:
            self.finished = time.time()

    @property
    def total(self) -> int:
        return len(self.results)

    def counts(self) -> dict[OutcomeStatus, int]:
        c = {s: 0 for s in OutcomeStatus}
        for status in self.results.values():
            c[status] += 1
        return c

    def success_rate(self) -> float | None:
        """Percent of apps that ended installed and current; None when nothing ran."""
        if not self.results:
            return None
        ok = sum(n for s, n in self.counts().items() if s.counts_as_success)
        return round(ok / self.total * 100, 1)

    def names_with(self, status: OutcomeStatus) -> list[str]:
        return [name for name, s in self.results.items() if s is status]

    def to_dict(self):
        return {
            "started": self.started,
            "finished": self.finished,
            "dry_run": self.dry_run,
            "results": [
                {"name": name, "id": self.package_ids[name], "status": s.value}
                for name, s in self.results.items()
            ],
            "counts": {s.value: n for s, n in self.counts().items()},
            "success_rate": self.success_rate(),
        }

    def save(self, fmt: str, path: Path):
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "json":
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
            return
        lines = ["DevApps Installer Report", ""]
        if self.dry_run:
            lines += ["Dry run: no winget command was executed.", ""]
        for name, s in self.results.items():
            lines.append(f"{name} ({self.package_ids[name]}): {s.value}")
        lines.append("")
        for s, n in self.counts().items():
            lines.append(f"{s.value}: {n}")
        rate = self.success_rate()
        lines.append(f"Success rate: {'n/a' if rate is None else f'{rate}%'}")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
