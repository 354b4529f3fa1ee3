from .admin import is_admin, run_as_admin, check_admin_or_confirm
from .colors import *
from .console import Console
from .process import Process
from .prompts import Confirmer, ConsoleConfirmer, AutoConfirmer
from .spinner import Spinner

__all__ = [
    "is_admin",
    "run_as_admin",
    "check_admin_or_confirm",
    "Console",
    "Process",
    "Confirmer",
    "ConsoleConfirmer",
    "AutoConfirmer",
    "Spinner",
]
