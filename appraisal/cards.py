# MIT License
"""Metric cards shown at the top of the dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from .currency import format_currency, format_number
from .params import FinancialMetrics, InvestmentRecord

Trend = Literal["up", "down", "neutral"]

TREND_TEXT = {"up": "Positive", "down": "Below target", "neutral": "Stable"}


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    description: str
    trend: Trend

    @property
    def trend_text(self) -> str:
        return TREND_TEXT[self.trend]


def _payback_trend(payback: float, horizon: int) -> Trend:
    return "up" if 0 < payback <= horizon / 2 else "neutral"


def _pi_trend(pi: float) -> Trend:
    if pi > 1:
        return "up"
    if pi < 1:
        return "down"
    return "neutral"


def build_metric_cards(record: InvestmentRecord, metrics: FinancialMetrics) -> List[MetricCard]:
    """Format ``metrics`` as cards with a trend judged against ``record``."""
    code = record.currency
    irr_desc = "Internal Rate of Return"
    if not metrics.irr_converged:
        irr_desc += " (did not converge)"
    payback_value = "N/A" if metrics.payback == -1 else f"{metrics.payback:.1f} periods"
    return [
        MetricCard(
            "NPV",
            format_currency(metrics.npv, code),
            "Net Present Value",
            "up" if metrics.npv > 0 else "down",
        ),
        MetricCard(
            "IRR",
            f"{metrics.irr:.2f}%",
            irr_desc,
            "up" if metrics.irr > record.discount_rate else "down",
        ),
        MetricCard(
            "Payback",
            payback_value,
            "Capital recovery",
            _payback_trend(metrics.payback, record.horizon),
        ),
        MetricCard(
            "ROI",
            f"{format_number(metrics.roi, code, 1)}%",
            "Return on Investment",
            "up" if metrics.roi > 50 else "neutral",
        ),
        MetricCard(
            "Profitability Index",
            format_number(metrics.profitability_index, code),
            "PV of inflows per unit invested",
            _pi_trend(metrics.profitability_index),
        ),
    ]
