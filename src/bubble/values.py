"""Value types for Bubble and their canonical text form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


class _Empty:
    """Singleton for absent expressions (malformed input)."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""


Empty = _Empty()

Value = Union[VNumber, VText, _Empty]


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_number(v: float) -> str:
    """Shortest round-tripping digits, always in positional notation.

    ``5.0`` → ``5``, ``1e16`` → ``10000000000000000``, ``1e-07`` →
    ``0.0000001``.
    """
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    text = format(Decimal(repr(v)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: Value) -> str:
    """Render *value* the way ``say`` and string concatenation see it."""
    if isinstance(value, VNumber):
        return format_number(value.value)
    if isinstance(value, VText):
        return value.value
    return ""
