import json
from pathlib import Path
from ..data.paths import CONFIG_DIR
from .catalog import DEFAULT_APPS, AppEntry, split_ids, table_from_mapping

DEFAULT_PAUSE_SECONDS = 2.0

DEFAULTS = {
    "skip_updates": False,
    "skip_dependencies": False,
    "yes": False,
    "pause_seconds": DEFAULT_PAUSE_SECONDS,
    "report": None,
    "out": None,
}

class ConfigStore:
    """
    Per-user JSON state: settings.json holds run defaults and an optional
    catalog override, config.json holds saved app profiles.
    """

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir else CONFIG_DIR
        self.config_path = self.base_dir / "config.json"
        self.settings_path = self.base_dir / "settings.json"
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.data = self._load_json(self.config_path) or {}
        self.settings = self._load_json(self.settings_path) or {"defaults": dict(DEFAULTS)}

    def _load_json(self, path: Path):
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        return data if isinstance(data, dict) else None

    def _atomic_write(self, path: Path, payload):
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp.replace(path)

    def save(self):
        self._atomic_write(self.config_path, self.data)

    def save_settings(self):
        self._atomic_write(self.settings_path, self.settings)

    def get_defaults(self) -> dict:
        d = self.settings.get("defaults") or {}
        for k, v in DEFAULTS.items():
            d.setdefault(k, v)
        self.settings["defaults"] = d
        return d

    def set_defaults(self, kv: dict):
        d = self.get_defaults()
        d.update(kv or {})
        self.save_settings()

    def get_catalog(self) -> tuple[AppEntry, ...]:
        custom = table_from_mapping(self.settings.get("catalog") or {})
        return custom or DEFAULT_APPS

    def list_profiles(self) -> list[str]:
        return sorted(self.data.get("profiles", {}).keys())

    def get_profile(self, name: str) -> list[str] | None:
        profiles = self.data.get("profiles", {})
        if name not in profiles:
            return None
        return list(profiles[name])

    def set_profile(self, name: str, ids):
        # order matters: apps are processed in the saved order
        self.data.setdefault("profiles", {})[name] = list(dict.fromkeys(split_ids(ids)))
        self.save()
