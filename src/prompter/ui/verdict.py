"""Validator results: ``Accepted(value)`` or ``REJECTED``."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Accepted(Generic[T]):
    value: T


class _Rejected:
    def __repr__(self) -> str:
        return "REJECTED"


REJECTED = _Rejected()

Verdict = Union[Accepted[T], _Rejected]
