"""
prompter - line-based interactive console prompts.

Ask for text, yes/no answers, numbers, or a pick from a list of options;
invalid answers are asked again until they are valid.
"""
from prompter.core.errors import (
    InputExhausted,
    InternalInvariantViolation,
    PreconditionViolation,
    PrompterError,
)
from prompter.ui.input import (
    PromptOptions,
    Prompter,
    choose,
    choose_shorthand,
    default_prompter,
    get,
    get_bool,
    get_double,
    get_int,
    set_default_prompter,
)
from prompter.ui.streams import ScriptedReader, TextStreamReader, TextStreamSink
from prompter.ui.verdict import REJECTED, Accepted

__version__ = "0.1.0"

__all__ = [
    "Accepted",
    "InputExhausted",
    "InternalInvariantViolation",
    "PreconditionViolation",
    "PromptOptions",
    "Prompter",
    "PrompterError",
    "REJECTED",
    "ScriptedReader",
    "TextStreamReader",
    "TextStreamSink",
    "choose",
    "choose_shorthand",
    "default_prompter",
    "get",
    "get_bool",
    "get_double",
    "get_int",
    "set_default_prompter",
]
