# MIT License
"""Data models for the investment appraisal dashboard.

All data models are defined using [`pydantic.BaseModel`](https://docs.pydantic.dev/)
to provide type checking, validation and JSON serialisation.

The :class:`InvestmentRecord` is the single entity edited through the
Streamlit form and persisted to the local store.  It is frozen: every edit
produces a new record (see :mod:`appraisal.state`).  Serialised keys are
camelCase, the shape used by the browser local-storage snapshot.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CurrencyCode(str, Enum):
    """Display currencies.  The choice never changes the arithmetic."""

    AOA = "AOA"
    USD = "USD"
    EUR = "EUR"
    BRL = "BRL"


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CashFlowEntry(_RecordModel):
    """A single period cash flow.

    Attributes
    ----------
    period:
        Period number (1, 2, ...).  Used as the discounting exponent for NPV.
    amount:
        Signed cash amount; negative values are outflows.
    """

    period: int = Field(..., ge=1)
    amount: float = Field(0.0, allow_inf_nan=False)


class InvestmentRecord(_RecordModel):
    """Inputs of one investment appraisal.

    Attributes
    ----------
    initial_investment:
        Outflow at period 0, non-negative.
    discount_rate:
        Discount rate in percent (15 means 15%).
    currency:
        Display currency.
    cash_flows:
        Ordered period cash flows.  Periods are expected to run 1..N but
        this is not enforced.
    """

    initial_investment: float = Field(0.0, ge=0.0, allow_inf_nan=False)
    discount_rate: float = Field(0.0, allow_inf_nan=False)
    currency: CurrencyCode = CurrencyCode.AOA
    cash_flows: Tuple[CashFlowEntry, ...] = ()

    @property
    def horizon(self) -> int:
        """Number of cash flow entries."""
        return len(self.cash_flows)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class FinancialMetrics(BaseModel):
    """Indicators derived from an :class:`InvestmentRecord`.

    Never persisted; recomputed whenever the record changes.  ``payback``
    is ``-1`` when the investment is not recovered within the horizon and
    ``irr`` is ``0`` when the solver did not converge (see
    ``irr_converged``).
    """

    model_config = ConfigDict(frozen=True)

    npv: float
    irr: float
    roi: float
    payback: float
    total_revenue: float
    profitability_index: float
    irr_converged: bool = True


class IrrSolution(BaseModel):
    """Raw outcome of the Newton-Raphson IRR search."""

    model_config = ConfigDict(frozen=True)

    rate: float
    iterations: int
    converged: bool

    @property
    def percent(self) -> float:
        return self.rate * 100.0 if self.converged else 0.0
