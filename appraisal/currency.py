# MIT License
"""Currency registry and display formatting.

The registry maps each :class:`~appraisal.params.CurrencyCode` to the symbol
and locale conventions used on screen and in the narrative prompt.  Amounts
are never converted; choosing a currency only changes how numbers look.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Union

from .params import CurrencyCode


@dataclass(frozen=True)
class CurrencyConfig:
    """Display conventions for one currency."""

    code: CurrencyCode
    symbol: str
    locale: str
    decimal_sep: str = "."
    group_sep: str = ","
    symbol_first: bool = True
    symbol_space: bool = False


CURRENCIES: Dict[CurrencyCode, CurrencyConfig] = {
    CurrencyCode.AOA: CurrencyConfig(
        CurrencyCode.AOA, "Kz", "pt-AO",
        decimal_sep=",", group_sep="\u00a0", symbol_first=False, symbol_space=True,
    ),
    CurrencyCode.USD: CurrencyConfig(CurrencyCode.USD, "$", "en-US"),
    CurrencyCode.EUR: CurrencyConfig(
        CurrencyCode.EUR, "€", "de-DE",
        decimal_sep=",", group_sep=".", symbol_first=False, symbol_space=True,
    ),
    CurrencyCode.BRL: CurrencyConfig(
        CurrencyCode.BRL, "R$", "pt-BR",
        decimal_sep=",", group_sep=".", symbol_first=True, symbol_space=True,
    ),
}


def get_currency(code: Union[CurrencyCode, str]) -> CurrencyConfig:
    """Look up a currency by code; raises ``ValueError`` for unknown codes."""
    return CURRENCIES[CurrencyCode(code)]


def format_number(value: float, code: Union[CurrencyCode, str], decimals: int = 2) -> str:
    """Format ``value`` with the grouping and decimal marks of ``code``'s locale."""
    cfg = get_currency(code)
    if math.isnan(value):
        return "N/A"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    text = f"{abs(value):,.{decimals}f}"
    text = text.translate(str.maketrans({",": cfg.group_sep, ".": cfg.decimal_sep}))
    # avoid "-0,00" for values that round to zero
    negative = value < 0 and round(abs(value), decimals) != 0
    return f"-{text}" if negative else text


def format_currency(value: float, code: Union[CurrencyCode, str], decimals: int = 2) -> str:
    """Format ``value`` as money, e.g. ``$1,234.50`` or ``1.234,50 €``."""
    cfg = get_currency(code)
    number = format_number(value, code, decimals)
    if number == "N/A":
        return number
    sign = ""
    if number.startswith("-"):
        sign, number = "-", number[1:]
    gap = " " if cfg.symbol_space else ""
    if cfg.symbol_first:
        return f"{sign}{cfg.symbol}{gap}{number}"
    return f"{sign}{number}{gap}{cfg.symbol}"
