# MIT License
"""Tabular view of an investment's cash flows.

:func:`cashflow_table` lays the initial outflow and each period cash flow
out as one row per period, with running balances both undiscounted and
discounted at the record's rate.  The frame feeds the dashboard charts,
the table tab and the CSV download.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .params import InvestmentRecord

COLUMNS = [
    "label",
    "period",
    "cash",
    "cumulative",
    "discount_factor",
    "present_value",
    "cumulative_present_value",
]


def cashflow_table(record: InvestmentRecord) -> pd.DataFrame:
    """Build the per-period cash flow table for ``record``.

    Parameters
    ----------
    record:
        Investment inputs.

    Returns
    -------
    pandas.DataFrame
        One row for the initial outflow (label ``"Inv."``, period 0)
        followed by one row per cash flow (``"P1"``, ``"P2"``, ...) in
        record order.  Discount factors use the declared period, as NPV
        does, so ``cumulative_present_value`` on the last row equals the
        NPV.
    """
    rate = record.discount_rate / 100.0
    labels = ["Inv."] + [f"P{cf.period}" for cf in record.cash_flows]
    periods = [0] + [cf.period for cf in record.cash_flows]
    cash = [-record.initial_investment] + [cf.amount for cf in record.cash_flows]
    df = pd.DataFrame({"label": labels, "period": periods, "cash": cash})
    df["cash"] = df["cash"].astype(float)
    df["cumulative"] = df["cash"].cumsum()
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        df["discount_factor"] = 1.0 / np.power(1.0 + rate, df["period"].astype(float))
        df["present_value"] = df["cash"] * df["discount_factor"]
    df["cumulative_present_value"] = df["present_value"].cumsum()
    return df[COLUMNS]
