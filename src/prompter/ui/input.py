"""
The prompt engine: show a message, read a logical line, validate, repeat.

Every other prompt kind (yes/no, numbers, menus) is a validator plus a
conversion wrapped around ``Prompter.ask``. Retrying is unbounded; a human
answers until the answer is valid. Only reader exhaustion ends a prompt
without an answer.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

from prompter.core.errors import InternalInvariantViolation, PreconditionViolation
from prompter.core.logging import logger
from prompter.ui import menu
from prompter.ui.streams import LineReader, OutputSink, TextStreamReader, TextStreamSink
from prompter.ui.verdict import REJECTED, Accepted, Verdict

T = TypeVar("T")

Validator = Callable[[str], bool]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass
class PromptOptions:
    validate: Optional[Validator] = None
    default: Optional[str] = None
    colon: bool = True
    allow_multiline: bool = False


def _not_blank(text: str) -> bool:
    return bool(text.strip())


def decorate(message: str, default: Optional[str] = None, colon: bool = True) -> str:
    """Build the text shown before reading, e.g. ``Name (bob): ``."""
    if not message:
        return ""
    text = message
    if default is not None:
        text += f" ({default})"
    if colon:
        text += ":"
    return text + " "


def format_int(value: int, radix: int = 10) -> str:
    """Render ``value`` in ``radix`` the way ``int(text, radix)`` reads it back."""
    if radix == 10:
        return str(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while True:
        value, rem = divmod(value, radix)
        digits.append(_DIGITS[rem])
        if not value:
            break
    return sign + "".join(reversed(digits))


class Prompter:
    def __init__(
        self,
        reader: LineReader | None = None,
        sink: OutputSink | None = None,
        colon: bool = True,
        allow_multiline: bool = False,
    ):
        self.reader = reader if reader is not None else TextStreamReader()
        self.sink = sink if sink is not None else TextStreamSink()
        self.colon = colon
        self.allow_multiline = allow_multiline

    @classmethod
    def from_settings(cls, settings, reader: LineReader | None = None, sink: OutputSink | None = None) -> "Prompter":
        data = settings.data
        return cls(reader, sink, colon=data.colon, allow_multiline=data.allow_multiline)

    def _read_candidate(self, allow_multiline: bool) -> str:
        parts = []
        while True:
            line = self.reader.read_line().rstrip()
            if allow_multiline and line.endswith("\\"):
                parts.append(line[:-1])
                continue
            parts.append(line)
            break
        return "\n".join(parts).strip()

    def ask(self, text: str, judge: Callable[[str], Verdict], allow_multiline: bool = False) -> Any:
        """Write ``text``, read a candidate and hand it to ``judge`` until it is accepted.

        Blocks with no retry limit. ``InputExhausted`` from the reader propagates.
        """
        attempt = 0
        while True:
            attempt += 1
            if text:
                self.sink.write(text)
            candidate = self._read_candidate(allow_multiline)
            verdict = judge(candidate)
            if isinstance(verdict, Accepted):
                logger.debug("Prompt answered", attempt=attempt)
                return verdict.value
            logger.debug("Rejected input, asking again", attempt=attempt, candidate=candidate)

    def prompt(self, message: str, options: PromptOptions) -> str:
        validate = options.validate or _not_blank
        default = options.default

        def judge(candidate: str) -> Verdict:
            if default is not None and not candidate.strip():
                return Accepted(default)
            if validate(candidate):
                return Accepted(candidate)
            return REJECTED

        return self.ask(decorate(message, default, options.colon), judge, options.allow_multiline)

    def get(
        self,
        message: str,
        validate: Optional[Validator] = None,
        default: Optional[str] = None,
        colon: Optional[bool] = None,
        allow_multiline: Optional[bool] = None,
    ) -> str:
        """Prompt for a line of text.

        Without ``validate`` any non-blank answer is accepted. With ``default``
        an empty answer is accepted too and replaced by the default. Lines
        ending in a backslash continue onto the next line when
        ``allow_multiline`` is on.
        """
        return self.prompt(message, PromptOptions(
            validate=validate,
            default=default,
            colon=self.colon if colon is None else colon,
            allow_multiline=self.allow_multiline if allow_multiline is None else allow_multiline,
        ))

    def get_bool(
        self,
        message: str,
        default: Optional[bool] = False,
        append_yes_no: bool = True,
        colon: Optional[bool] = None,
    ) -> bool:
        """Yes/no question. The capital letter in ``(Y/n)`` marks what Enter picks."""
        if append_yes_no:
            if default is None:
                message += " (y/n)"
            else:
                message += " (Y/n)" if default else " (y/N)"

        def validate(text: str) -> bool:
            text = text.strip().lower()
            return (default is not None and not text) or text.startswith("y") or text.startswith("n")

        result = self.get(message, validate=validate, colon=colon, allow_multiline=False).lower()
        if not result:
            return default
        return result.startswith("y")

    def get_int(
        self,
        message: str,
        default: Optional[int] = None,
        radix: int = 10,
        colon: Optional[bool] = None,
    ) -> int:
        if not 2 <= radix <= 36:
            raise PreconditionViolation(f"radix must be between 2 and 36, got {radix}")

        def validate(text: str) -> bool:
            try:
                int(text, radix)
            except ValueError:
                return False
            return True

        shown = None if default is None else format_int(default, radix)
        text = self.get(message, validate=validate, default=shown, colon=colon, allow_multiline=False)
        try:
            return int(text, radix)
        except ValueError as e:
            raise InternalInvariantViolation("get_int", f"accepted {text!r} is not a base-{radix} integer") from e

    def get_double(
        self,
        message: str,
        default: Optional[float] = None,
        colon: Optional[bool] = None,
    ) -> float:
        def validate(text: str) -> bool:
            try:
                float(text)
            except ValueError:
                return False
            return True

        shown = None if default is None else str(float(default))
        text = self.get(message, validate=validate, default=shown, colon=colon, allow_multiline=False)
        try:
            return float(text)
        except ValueError as e:
            raise InternalInvariantViolation("get_double", f"accepted {text!r} is not a number") from e

    def choose(self, message: str, options: Sequence[T], default: Optional[T] = None, colon: Optional[bool] = None) -> T:
        return menu.choose(self, message, options, default, self.colon if colon is None else colon)

    def choose_shorthand(self, message: str, options: Sequence[T], default: Optional[T] = None, colon: Optional[bool] = None) -> T:
        return menu.choose_shorthand(self, message, options, default, self.colon if colon is None else colon)


_default_prompter: Prompter | None = None


def default_prompter() -> Prompter:
    """Console prompter shared by the module-level helpers."""
    global _default_prompter
    if _default_prompter is None:
        _default_prompter = Prompter()
    return _default_prompter


def set_default_prompter(prompter: Prompter | None):
    global _default_prompter
    _default_prompter = prompter


def get(message: str, validate: Optional[Validator] = None, default: Optional[str] = None,
        colon: Optional[bool] = None, allow_multiline: Optional[bool] = None) -> str:
    return default_prompter().get(message, validate, default, colon, allow_multiline)


def get_bool(message: str, default: Optional[bool] = False, append_yes_no: bool = True,
             colon: Optional[bool] = None) -> bool:
    return default_prompter().get_bool(message, default, append_yes_no, colon)


def get_int(message: str, default: Optional[int] = None, radix: int = 10, colon: Optional[bool] = None) -> int:
    return default_prompter().get_int(message, default, radix, colon)


def get_double(message: str, default: Optional[float] = None, colon: Optional[bool] = None) -> float:
    return default_prompter().get_double(message, default, colon)


def choose(message: str, options: Sequence[T], default: Optional[T] = None, colon: Optional[bool] = None) -> T:
    return default_prompter().choose(message, options, default, colon)


def choose_shorthand(message: str, options: Sequence[T], default: Optional[T] = None, colon: Optional[bool] = None) -> T:
    return default_prompter().choose_shorthand(message, options, default, colon)
