from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from prompter.core.logging import logger

SETTINGS_FILENAME = ".prompter_settings.json"
SETTINGS_ENV = "PROMPTER_SETTINGS"

@dataclass
class SettingsData:
    log_level: str = "INFO"
    colon: bool = True            # append ':' to prompts unless a call says otherwise
    allow_multiline: bool = False # trailing '\' continues text prompts

    def normalize(self):
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if not isinstance(self.colon, bool):
            self.colon = True
        if not isinstance(self.allow_multiline, bool):
            self.allow_multiline = False

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        env = os.environ.get(SETTINGS_ENV)
        if env:
            return Path(env)
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text())
                known = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in known})
                data.normalize()
                logger.debug("Loaded settings", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("Failed to parse settings, using defaults", error=str(e))
        return cls(SettingsData(), path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2))
            logger.debug("Settings saved", path=str(self.path))
        except OSError as e:
            logger.error("Failed to save settings", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def update(self, **changes):
        for key, value in changes.items():
            if not hasattr(self.data, key):
                raise AttributeError(f"Unknown setting '{key}'")
            setattr(self.data, key, value)
        self.data.normalize()
        self._notify()

    def apply_log_level(self):
        logger.set_level(self.data.log_level)
