# MIT License
"""Edits applied to an :class:`InvestmentRecord`.

Records are frozen, so every function here returns a new record and
leaves its argument untouched.  The Streamlit page swaps the result into
``st.session_state`` and snapshots it to the local store.
"""
from __future__ import annotations

from typing import Union

from .params import CashFlowEntry, CurrencyCode, InvestmentRecord

DEFAULT_AMOUNTS = (1_000_000.0, 1_500_000.0, 2_000_000.0, 2_500_000.0, 3_000_000.0)


def default_record() -> InvestmentRecord:
    """Starting record shown on first visit."""
    return InvestmentRecord(
        initial_investment=5_000_000.0,
        discount_rate=15.0,
        currency=CurrencyCode.AOA,
        cash_flows=tuple(
            CashFlowEntry(period=i, amount=amount)
            for i, amount in enumerate(DEFAULT_AMOUNTS, start=1)
        ),
    )


def set_initial_investment(record: InvestmentRecord, value: float) -> InvestmentRecord:
    return record.model_copy(update={"initial_investment": float(value)})


def set_discount_rate(record: InvestmentRecord, value: float) -> InvestmentRecord:
    return record.model_copy(update={"discount_rate": float(value)})


def set_currency(record: InvestmentRecord, code: Union[CurrencyCode, str]) -> InvestmentRecord:
    return record.model_copy(update={"currency": CurrencyCode(code)})


def update_cash_flow(record: InvestmentRecord, index: int, amount: float) -> InvestmentRecord:
    """Replace the amount of the entry at ``index``, keeping its period.

    Raises ``IndexError`` when ``index`` is outside the horizon.
    """
    if not 0 <= index < len(record.cash_flows):
        raise IndexError(f"cash flow index {index} out of range")
    flows = list(record.cash_flows)
    flows[index] = CashFlowEntry(period=flows[index].period, amount=float(amount))
    return record.model_copy(update={"cash_flows": tuple(flows)})


def add_period(record: InvestmentRecord) -> InvestmentRecord:
    """Append a zero cash flow numbered ``len(cash_flows) + 1``."""
    entry = CashFlowEntry(period=len(record.cash_flows) + 1, amount=0.0)
    return record.model_copy(update={"cash_flows": record.cash_flows + (entry,)})


def remove_last_period(record: InvestmentRecord) -> InvestmentRecord:
    """Drop the final cash flow; a record without cash flows is returned as is."""
    if not record.cash_flows:
        return record
    return record.model_copy(update={"cash_flows": record.cash_flows[:-1]})
