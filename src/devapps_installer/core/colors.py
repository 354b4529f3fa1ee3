import os

def _enabled() -> bool:
    return not os.getenv("NO_COLOR")

def C256(n: int) -> str:
    return f"\x1b[38;5;{n}m" if _enabled() else ""

def _sgr(code: str) -> str:
    return f"\x1b[{code}m" if _enabled() else ""

RESET   = _sgr("0")
BOLD    = _sgr("1")
DIM     = _sgr("2")
RED     = _sgr("31")
GREEN   = _sgr("32")
YELLOW  = _sgr("33")
MAGENTA = _sgr("35")
CYAN    = _sgr("36")

TEAL    = C256(37)
ORANGE  = C256(208)
GRAY    = C256(245)
WHITE   = C256(255)

def paint(text: str, *styles: str) -> str:
    if not styles or not _enabled():
        return text
    return f"{''.join(styles)}{text}{RESET}"
