import os, ctypes, sys, io
from datetime import datetime
from pathlib import Path
from .colors import *
from ..data.paths import LOG_DIR

class _Tee(io.TextIOBase):
    def __init__(self, a, b): self.a, self.b = a, b
    def write(self, s): self.a.write(s); self.b.write(s); return len(s)
    def flush(self): self.a.flush(); self.b.flush()

class Console:
    def __init__(self, debug: bool=False, dry_run: bool=False):
        self.debug = debug
        self.dry_run = dry_run
        self.log_path: Path | None = None
        self._log_fp = None
        self._saved_streams = None

    def enable_windows_ansi_utf8(self):
        if os.name != "nt":
            return
        try:
            k32 = ctypes.windll.kernel32
            hOut = k32.GetStdHandle(-11)
            mode = ctypes.c_uint32()
            if k32.GetConsoleMode(hOut, ctypes.byref(mode)):
                k32.SetConsoleMode(hOut, mode.value | 0x0004)
            k32.SetConsoleOutputCP(65001)
            k32.SetConsoleCP(65001)
        except Exception:
            pass

    def start_run_log(self, log_dir: Path = LOG_DIR) -> Path | None:
        """
        Mirror everything written to stdout/stderr into a per-run log file.
        Returns the log path, or None when the log could not be opened.
        """
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / f"run-{datetime.now().strftime('%Y%m%d-%H%M%S')}.log"
            self._log_fp = open(log_path, "w", encoding="utf-8", errors="replace")
        except OSError as e:
            self.warn(f"Run log disabled: {e}")
            return None
        self._saved_streams = (sys.stdout, sys.stderr)
        sys.stdout = _Tee(sys.stdout, self._log_fp)
        sys.stderr = _Tee(sys.stderr, self._log_fp)
        self.log_path = log_path
        return log_path

    def close(self):
        if self._saved_streams:
            sys.stdout, sys.stderr = self._saved_streams
            self._saved_streams = None
        if self._log_fp:
            self._log_fp.close()
            self._log_fp = None

    def header(self, title: str):
        line = "=" * 72
        print(paint(line, ORANGE, BOLD))
        print(paint(title, ORANGE, BOLD))
        print(paint(line, ORANGE, BOLD))

    def info(self, msg): print(paint(f"→ {msg}", CYAN))
    def ok(self, msg):   print(paint(f"✔ {msg}", GREEN))
    def warn(self, msg): print(paint(f"⚠ {msg}", YELLOW))
    def err(self, msg):  print(paint(f"✘ {msg}", RED, BOLD))

    def dbg(self, msg):
        if self.debug:
            print(paint(f">>> {msg}", MAGENTA, DIM))

    def banner(self, version: str, admin: bool):
        ctx = "Administrator" if admin else "User"
        ctx_color = GREEN if admin else YELLOW
        print()
        print(f"{paint('DevApps Installer', TEAL, BOLD)}  {paint(f'v{version} · install • update • report', GRAY)}")
        print(f"{paint('Context:', ctx_color, BOLD)} {ctx}")
        if self.dry_run:
            print(paint("Dry run: winget commands are printed, not executed.", GRAY))
        print()
