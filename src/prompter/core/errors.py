from __future__ import annotations

class PrompterError(Exception):
    """Base for internal errors."""

class InputExhausted(PrompterError, EOFError):
    def __init__(self, detail: str = "no more input lines"):
        super().__init__(f"Input exhausted: {detail}")
        self.detail = detail

class PreconditionViolation(PrompterError, ValueError):
    pass

class InternalInvariantViolation(PrompterError, RuntimeError):
    def __init__(self, operation: str, detail: str):
        super().__init__(f"Invariant broken in '{operation}': {detail}")
        self.operation = operation
        self.detail = detail
