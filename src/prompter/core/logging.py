from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Literal, Any, TextIO

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}

Level = Literal["DEBUG","INFO","WARN","ERROR"]

LEVEL_ORDER = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}

class Logger:
    """Leveled logger; writes to stderr so stdout stays reserved for prompts."""

    def __init__(self, level: Level = "INFO", stream: TextIO | None = None):
        self.threshold = LEVEL_ORDER[level]
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved late so pytest's capsys sees the swapped sys.stderr
        return self._stream if self._stream is not None else sys.stderr

    def set_level(self, level: Level):
        self.threshold = LEVEL_ORDER[level]

    def set_stream(self, stream: TextIO | None):
        self._stream = stream

    def _emit(self, level: Level, msg: str, **extra: Any):
        if LEVEL_ORDER[level] < self.threshold:
            return
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extrastr = (" " + " ".join(f"{k}={v!r}" for k,v in extra.items())) if extra else ""
        self.stream.write(f"{COLORS[level]}{stamp} [{level}] {msg}{extrastr}{Style.RESET_ALL}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger("INFO")
