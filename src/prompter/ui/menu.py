"""
Option selectors built on the prompt engine.

``choose`` shows a numbered list and takes either the number or the exact
option text. ``choose_shorthand`` fits on one line and also takes the first
letter of an option. Options are rendered with ``str()`` and compared with
``==``; when two options render the same, text matches pick the first one,
numbers never clash.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Sequence, TypeVar

from prompter.core.errors import PreconditionViolation
from prompter.ui.verdict import REJECTED, Accepted, Verdict

if TYPE_CHECKING:
    from prompter.ui.input import Prompter

T = TypeVar("T")

DEFAULT_MARKER = " [Default - Press Enter]"


def _require_options(options: Sequence[T], operation: str) -> List[T]:
    options = list(options)
    if not options:
        raise PreconditionViolation(f"{operation}() needs at least one option")
    return options


def _menu_index(text: str, count: int) -> Optional[int]:
    try:
        number = int(text)
    except ValueError:
        return None
    if 1 <= number <= count:
        return number - 1
    return None


def render_numbered(message: str, options: Sequence[T], default: Optional[T] = None, colon: bool = True) -> str:
    """Menu body: message, blank line, ``1) ...`` per option, blank line."""
    if colon:
        message += ":"
    lines = [message, ""]
    for i, option in enumerate(options, 1):
        line = f"{i}) {option}"
        if default is not None and option == default:
            line += DEFAULT_MARKER
        lines.append(line)
    return "\n".join(lines) + "\n\n"


def choose(prompter: "Prompter", message: str, options: Sequence[T],
           default: Optional[T] = None, colon: bool = True) -> T:
    options = _require_options(options, "choose")
    displays = [str(option) for option in options]

    def judge(candidate: str) -> Verdict:
        if not candidate:
            return Accepted(default) if default is not None else REJECTED
        index = _menu_index(candidate, len(options))
        if index is not None:
            return Accepted(options[index])
        if candidate in displays:
            return Accepted(options[displays.index(candidate)])
        return REJECTED

    # a single space always follows the menu body, matching plain prompts
    return prompter.ask(render_numbered(message, options, default, colon) + " ", judge)


def shorthand_labels(options: Sequence[T], default: Optional[T] = None) -> List[str]:
    """Display strings for the one-line menu; the default is the only capitalized one."""
    labels = []
    for option in options:
        label = str(option)
        if not label:
            raise PreconditionViolation(f"option {option!r} renders as an empty string")
        if default is not None:
            head = label[0].upper() if option == default else label[0].lower()
            label = head + label[1:]
        labels.append(label)
    return labels


def choose_shorthand(prompter: "Prompter", message: str, options: Sequence[T],
                     default: Optional[T] = None, colon: bool = True) -> T:
    options = _require_options(options, "choose_shorthand")
    labels = shorthand_labels(options, default)
    initials = [label[0].lower() for label in labels]
    text = message + (":" if colon else "") + " (" + "/".join(labels) + ") "

    def judge(candidate: str) -> Verdict:
        if not candidate:
            return Accepted(default) if default is not None else REJECTED
        if candidate in labels:
            return Accepted(options[labels.index(candidate)])
        initial = candidate[0].lower()
        if initial in initials:
            return Accepted(options[initials.index(initial)])
        return REJECTED

    return prompter.ask(text, judge)
