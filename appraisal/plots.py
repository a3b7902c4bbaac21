# MIT License
"""Plotly figure builders for the investment dashboard.

Both builders take the frame produced by
:func:`appraisal.aggregate.cashflow_table` so the charts and the table tab
always show the same numbers.
"""

from __future__ import annotations

from typing import Union

import pandas as pd
import plotly.graph_objects as go

from .currency import get_currency
from .params import CurrencyCode

GOLD = "#e5aa70"
GOLD_FILL = "rgba(229, 170, 112, 0.2)"
POSITIVE = "#34d399"
NEGATIVE = "#fb7185"


def fig_cumulative_cashflow(df: pd.DataFrame, currency: Union[CurrencyCode, str]) -> go.Figure:
    """Create an area chart of the cumulative balance.

    Parameters
    ----------
    df:
        Dataframe with at least columns 'label' and 'cumulative'.
    currency:
        Display currency for the axis title and hover labels.

    Returns
    -------
    plotly.graph_objects.Figure
        A filled line starting at the initial outflow.
    """
    cfg = get_currency(currency)
    fig = go.Figure()
    fig.add_scatter(
        x=df["label"],
        y=df["cumulative"],
        mode="lines+markers",
        name="Balance",
        line={"color": GOLD, "width": 2, "shape": "spline"},
        fill="tozeroy",
        fillcolor=GOLD_FILL,
        hovertemplate=f"%{{x}}<br>Balance: {cfg.symbol} %{{y:,.2f}}<extra></extra>",
    )
    fig.add_hline(y=0, line={"color": "rgba(128,128,128,0.5)", "dash": "dot"})
    fig.update_layout(
        title=f"Cumulative Performance ({cfg.code.value})",
        xaxis_title="Period",
        yaxis_title=cfg.code.value,
        yaxis={"tickformat": "~s"},
        template="plotly_white",
    )
    return fig


def fig_cashflow(df: pd.DataFrame, currency: Union[CurrencyCode, str]) -> go.Figure:
    """Create a bar chart of the cash flow in each period, outflows in red."""
    cfg = get_currency(currency)
    colors = [POSITIVE if v >= 0 else NEGATIVE for v in df["cash"]]
    fig = go.Figure()
    fig.add_bar(x=df["label"], y=df["cash"], name="Cash flow", marker_color=colors)
    fig.update_layout(
        title="Cash Flow per Period",
        xaxis_title="Period",
        yaxis_title=cfg.code.value,
        yaxis={"tickformat": "~s"},
        template="plotly_white",
    )
    return fig
