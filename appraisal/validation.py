# MIT License
"""Parsing of numeric form fields.

Text typed into the dashboard is parsed into a :class:`NumberInput`.  A
failed parse still carries a usable value of ``0.0`` so the record keeps
finite numbers, but the error kind is kept so the page can show a
correction hint next to the field.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class InputError(str, Enum):
    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    NOT_FINITE = "not_finite"
    NEGATIVE = "negative"


_HINTS = {
    InputError.EMPTY: "Enter a number; an empty field counts as 0.",
    InputError.NOT_A_NUMBER: "Not a number; using 0. Use digits with an optional decimal point.",
    InputError.NOT_FINITE: "Value is too large or not finite; using 0.",
    InputError.NEGATIVE: "Value must not be negative; using 0.",
}

# thousands separators accepted inside a number
_GROUPING = re.compile("[ _\u00a0\u202f]")


@dataclass(frozen=True)
class NumberInput:
    """Result of parsing one numeric field."""

    value: float
    error: Optional[InputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def hint(self) -> Optional[str]:
        return correction_hint(self.error) if self.error else None


def correction_hint(error: InputError) -> str:
    """Short message telling the user how to fix a field."""
    return _HINTS[error]


def _normalise(text: str) -> str:
    """Strip grouping marks and turn the decimal mark into a point.

    When both ``,`` and ``.`` appear the last one is the decimal mark
    (``1,000.5`` and ``1.000,5``).  A single ``,`` alone is a decimal comma;
    a mark repeated on its own is grouping (``1.000.000``).
    """
    text = _GROUPING.sub("", text.strip())
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if text.count(",") == 1:
        return text.replace(",", ".")
    if text.count(",") > 1:
        return text.replace(",", "")
    if text.count(".") > 1:
        return text.replace(".", "")
    return text


def parse_number(raw: Union[str, float, int, None], allow_negative: bool = True) -> NumberInput:
    """Parse ``raw`` into a finite float.

    Parameters
    ----------
    raw:
        Field content.  Numbers pass through the same finiteness and sign
        checks as text.
    allow_negative:
        When ``False`` a negative value is rejected with
        :attr:`InputError.NEGATIVE`.

    Returns
    -------
    NumberInput
        The parsed value, or ``0.0`` together with the error kind.
    """
    if raw is None:
        return NumberInput(0.0, InputError.EMPTY)
    if isinstance(raw, bool):
        return NumberInput(0.0, InputError.NOT_A_NUMBER)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = _normalise(str(raw))
        if not text:
            return NumberInput(0.0, InputError.EMPTY)
        try:
            value = float(text)
        except ValueError:
            return NumberInput(0.0, InputError.NOT_A_NUMBER)
    if not math.isfinite(value):
        return NumberInput(0.0, InputError.NOT_FINITE)
    if value < 0 and not allow_negative:
        return NumberInput(0.0, InputError.NEGATIVE)
    return NumberInput(value)


def coerce_number(raw: Union[str, float, int, None], allow_negative: bool = True) -> float:
    """Parse ``raw`` and fall back to ``0.0`` on any error."""
    return parse_number(raw, allow_negative=allow_negative).value
