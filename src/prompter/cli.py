from __future__ import annotations
import sys
from enum import Enum
from rich.console import Console
from rich.table import Table
from prompter.core.errors import InputExhausted
from prompter.core.logging import logger
from prompter.system.settings import Settings
from prompter.ui.input import Prompter

class Color(Enum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"

    def __str__(self) -> str:
        return self.value

def _interview(p: Prompter) -> list[tuple[str, object]]:
    """One question of every prompt kind."""
    answers: list[tuple[str, object]] = []
    answers.append(("name", p.get("Your name", default="anonymous")))
    answers.append(("note", p.get("A note (end a line with \\ to continue)", allow_multiline=True)))
    answers.append(("likes_tea", p.get_bool("Do you like tea", default=True)))
    answers.append(("age", p.get_int("Age")))
    answers.append(("mask", p.get_int("Favorite byte in hex", default=255, radix=16)))
    answers.append(("height_m", p.get_double("Height in meters", default=1.75)))
    answers.append(("color", p.choose("Pick a color", list(Color), default=Color.RED)))
    answers.append(("proceed", p.choose_shorthand("Save answers", ["Yes", "No", "Later"], default="Yes")))
    return answers

def _show(answers: list[tuple[str, object]], console: Console):
    table = Table(title="Answers")
    table.add_column("Question", style="bright_cyan")
    table.add_column("Value")
    table.add_column("Type", style="dim")
    for key, value in answers:
        table.add_row(key, repr(value) if isinstance(value, str) and "\n" in value else str(value), type(value).__name__)
    console.print(table)

def run(argv: list[str] | None = None) -> int:
    settings = Settings.load()
    settings.apply_log_level()
    settings.on_change(lambda data: logger.set_level(data.log_level))
    if argv is None:
        argv = sys.argv[1:]
    if "--debug" in argv:
        settings.update(log_level="DEBUG")
    prompter = Prompter.from_settings(settings)
    console = Console()
    try:
        answers = _interview(prompter)
    except InputExhausted as e:
        logger.error("Input ended before all questions were answered", detail=e.detail)
        return 1
    except KeyboardInterrupt:
        print()
        return 130
    print()
    _show(answers, console)
    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
