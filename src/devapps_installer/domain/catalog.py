import re
from dataclasses import dataclass
from typing import Iterable, Sequence

@dataclass(frozen=True)
class AppEntry:
    name: str
    package_id: str

DEFAULT_APPS: tuple[AppEntry, ...] = (
    AppEntry("Git", "Git.Git"),
    AppEntry("Visual Studio Code", "Microsoft.VisualStudioCode"),
    AppEntry("Python 3", "Python.Python.3.12"),
    AppEntry("Node.js LTS", "OpenJS.NodeJS.LTS"),
    AppEntry("Windows Terminal", "Microsoft.WindowsTerminal"),
    AppEntry("PowerShell", "Microsoft.PowerShell"),
    AppEntry("Docker Desktop", "Docker.DockerDesktop"),
)

def looks_like_id(s: str) -> bool:
    return bool(re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9\-\._]+[A-Za-z0-9]", s or "")) and ("." in s)

def split_ids(values: Iterable[str] | None) -> list[str]:
    """Flatten ["a,b", " c "] into ["a", "b", "c"]."""
    out: list[str] = []
    for v in values or []:
        for part in str(v).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out

def table_from_mapping(mapping: dict) -> tuple[AppEntry, ...]:
    return tuple(AppEntry(str(name), str(pid)) for name, pid in (mapping or {}).items() if name and pid)

def resolve_apps(package_ids: Sequence[str] | None, table: Sequence[AppEntry] = DEFAULT_APPS) -> list[AppEntry]:
    """
    Build the list of apps for one run.

    Without ids the whole table is used. Each given id picks up the display
    name of the table entry with the same id; unknown ids are shown by id.
    Ids are deduplicated. A display name already used by an earlier entry
    falls back to the id, then to a numbered variant, so names stay unique.
    """
    ids = split_ids(package_ids) or [e.package_id for e in table]
    names: dict[str, str] = {}
    for e in table:
        names.setdefault(e.package_id, e.name)
    resolved: list[AppEntry] = []
    seen_ids: set[str] = set()
    used_names: set[str] = set()
    for pid in ids:
        if pid in seen_ids:
            continue
        seen_ids.add(pid)
        name = names.get(pid, pid)
        if name in used_names:
            name = pid
        base, n = name, 2
        while name in used_names:
            name = f"{base} ({n})"
            n += 1
        used_names.add(name)
        resolved.append(AppEntry(name, pid))
    return resolved
