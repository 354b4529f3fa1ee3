# core/process.py
import subprocess, platform
from .colors import GRAY, paint

def _win_creation():
    if platform.system() != "Windows":
        return {}
    si = subprocess.STARTUPINFO()
    si.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    flags = 0x08000000  # CREATE_NO_WINDOW
    return {"startupinfo": si, "creationflags": flags}

def format_cmd(cmd) -> str:
    return " ".join(f'"{c}"' if " " in str(c) else str(c) for c in cmd)

class Process:
    """
    Thin subprocess wrapper. Both runners return an exit code instead of
    raising; a command that cannot be started reports 1.
    """

    def __init__(self, console, dry_run: bool=False):
        self.console = console
        self.dry_run = dry_run
        self._win_kwargs = _win_creation()

    def run_stream(self, cmd: list[str]) -> int:
        self.console.dbg(format_cmd(cmd))
        if self.dry_run:
            print(f"{paint('[dry-run]', GRAY)} {format_cmd(cmd)}")
            return 0
        p = None
        try:
            p = subprocess.Popen(
                cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                text=True, encoding="utf-8", errors="replace",
                shell=False, **self._win_kwargs
            )
            assert p.stdout is not None
            for line in p.stdout:
                s = (line or "").rstrip("\r\n")
                if s.strip():
                    print(f"  {s}")
            return p.wait()
        except KeyboardInterrupt:
            if p is not None:
                p.terminate()
            raise
        except OSError as e:
            self.console.dbg(f"cannot start {cmd[0]}: {e}")
            return 1

    def run_capture(self, cmd: list[str]) -> tuple[int, str]:
        self.console.dbg(format_cmd(cmd))
        if self.dry_run:
            return 0, ""
        try:
            r = subprocess.run(
                cmd, capture_output=True, text=True,
                encoding="utf-8", errors="replace",
                shell=False, **self._win_kwargs
            )
            return r.returncode, r.stdout or ""
        except OSError as e:
            self.console.dbg(f"cannot start {cmd[0]}: {e}")
            return 1, ""
