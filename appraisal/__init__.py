"""Core package for the investment appraisal dashboard.

This package contains the data models, the capital-budgeting metrics
engine, the local snapshot store and the narrative-insight client used by
the Streamlit page in ``app.py``.

The metrics in `economics.py` are pure functions of an
:class:`InvestmentRecord`; everything else is presentation support or I/O.
"""

from .params import CashFlowEntry, CurrencyCode, FinancialMetrics, InvestmentRecord, IrrSolution
from .currency import CURRENCIES, format_currency, format_number
from .economics import (
    compute_irr,
    compute_npv,
    compute_payback,
    compute_profitability_index,
    compute_roi,
    get_full_metrics,
    solve_irr,
)
from .state import add_period, default_record, update_cash_flow
from .storage import LocalStore, RecordRepository
from .insights import InsightClient, InsightError

__all__ = [
    "CashFlowEntry",
    "CurrencyCode",
    "FinancialMetrics",
    "InvestmentRecord",
    "IrrSolution",
    "CURRENCIES",
    "format_currency",
    "format_number",
    "compute_irr",
    "compute_npv",
    "compute_payback",
    "compute_profitability_index",
    "compute_roi",
    "get_full_metrics",
    "solve_irr",
    "add_period",
    "default_record",
    "update_cash_flow",
    "LocalStore",
    "RecordRepository",
    "InsightClient",
    "InsightError",
]
