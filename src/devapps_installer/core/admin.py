import ctypes, os, sys
from .console import Console

def is_admin() -> bool:
    if os.name != "nt":
        return False
    try:
        return ctypes.windll.shell32.IsUserAnAdmin() != 0
    except Exception:
        return False

def run_as_admin(argv=None) -> bool:
    """
    Relaunch the current Python with elevation (UAC). Returns True if the
    ShellExecute call was issued (i.e., elevation prompt shown).
    """
    if os.name != "nt":
        return False
    if argv is None:
        argv = [sys.executable, "-m", "devapps_installer"] + sys.argv[1:]
    params = " ".join(f'"{a}"' if " " in a else a for a in argv[1:])
    try:
        # ShellExecuteW returns a value > 32 on success
        return ctypes.windll.shell32.ShellExecuteW(None, "runas", argv[0], params, None, 1) > 32
    except Exception:
        return False

def check_admin_or_confirm(console: Console, confirmer) -> bool:
    """
    Returns True if elevated, or if the user agrees to continue without it.
    """
    if is_admin():
        return True
    console.warn("Not running as Administrator. Some installers may fail or ask for elevation.")
    console.info("Re-open the terminal as Administrator, or pass --elevate.")
    return confirmer.confirm("Continue without Administrator rights?")
