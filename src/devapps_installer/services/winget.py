import re
from ..core.console import Console
from ..core.process import Process

AGREEMENTS = ["--accept-source-agreements"]
SILENT = ["--silent", "--accept-package-agreements", "--accept-source-agreements", "--disable-interactivity"]

def mentions_id(output: str, package_id: str) -> bool:
    """True if package_id appears in winget output as a whole token."""
    if not output or not package_id:
        return False
    pat = rf"(?<![\w.\-]){re.escape(package_id)}(?![\w.\-])"
    return re.search(pat, output, flags=re.IGNORECASE) is not None

class WingetClient:
    def __init__(self, console: Console, proc: Process | None = None, exe: str = "winget"):
        self.console = console
        self.proc = proc or Process(console, dry_run=console.dry_run)
        self.exe = exe

    def is_available(self) -> bool:
        try:
            rc, _ = self.proc.run_capture([self.exe, "--version"])
        except Exception:
            return False
        return rc == 0

    def update_sources(self) -> bool:
        rc, _ = self.proc.run_capture([self.exe, "source", "update"])
        return rc == 0

    # The two checks below fail open: an error reads as "no".
    def is_installed(self, package_id: str) -> bool:
        try:
            rc, out = self.proc.run_capture([self.exe, "list", "--id", package_id, "--exact"] + AGREEMENTS)
        except Exception as e:
            self.console.dbg(f"list {package_id} failed: {e}")
            return False
        return rc == 0 and mentions_id(out, package_id)

    def has_update(self, package_id: str) -> bool:
        try:
            rc, out = self.proc.run_capture([self.exe, "upgrade", "--include-unknown"] + AGREEMENTS)
        except Exception as e:
            self.console.dbg(f"upgrade listing failed: {e}")
            return False
        return rc == 0 and mentions_id(out, package_id)

    def install(self, package_id: str) -> int:
        return self.proc.run_stream([self.exe, "install", "--id", package_id, "--exact"] + SILENT)

    def upgrade(self, package_id: str) -> int:
        return self.proc.run_stream([self.exe, "upgrade", "--id", package_id, "--exact"] + SILENT)
