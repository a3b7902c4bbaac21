# MIT License
"""Capital-budgeting metrics for the investment dashboard.

This module defines the financial indicators shown on the dashboard: net
present value (NPV), internal rate of return (IRR), simple payback, return
on investment (ROI) and profitability index.  The functions are pure and
total: degenerate inputs (zero investment, empty horizon, a cash flow
sequence without a root) produce a defined number such as ``inf``, ``-1``
or ``0`` instead of raising.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .params import FinancialMetrics, InvestmentRecord, IrrSolution

IRR_GUESS = 0.1
IRR_PRECISION = 1e-7
IRR_MAX_ITERATIONS = 1000
NOT_RECOVERED = -1.0


def _discounted(amount: float, growth: float, exponent: int) -> float:
    """Return ``amount / growth ** exponent`` without raising.

    A zero growth factor (a -100% rate) maps to a signed infinity, and a
    growth factor too large to represent discounts the amount to zero.
    """
    try:
        return amount / growth ** exponent
    except ZeroDivisionError:
        return math.copysign(math.inf, amount) if amount else 0.0
    except OverflowError:
        return 0.0


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        # signed infinity, or 0 when there is nothing to divide
        return math.copysign(math.inf, numerator) if numerator else 0.0
    return numerator / denominator


def total_revenue(record: InvestmentRecord) -> float:
    """Unweighted sum of all period cash flows."""
    return sum(cf.amount for cf in record.cash_flows)


def compute_npv(record: InvestmentRecord) -> float:
    """Compute the net present value of an investment.

    Each cash flow is discounted at ``discount_rate`` (percent) compounded
    over its declared ``period``; periods need not be contiguous.

    Parameters
    ----------
    record:
        Investment inputs.

    Returns
    -------
    float
        ``-initial_investment + sum(amount / (1 + rate) ** period)``.
    """
    growth = 1.0 + record.discount_rate / 100.0
    npv = -record.initial_investment
    for cf in record.cash_flows:
        npv += _discounted(cf.amount, growth, cf.period)
    return npv


def irr_flows(record: InvestmentRecord) -> List[float]:
    """Cash flow vector used by the IRR search, outflow first."""
    return [-record.initial_investment] + [cf.amount for cf in record.cash_flows]


def solve_irr(
    flows: Sequence[float],
    guess: float = IRR_GUESS,
    precision: float = IRR_PRECISION,
    max_iterations: int = IRR_MAX_ITERATIONS,
) -> IrrSolution:
    """Find the rate where the present value of ``flows`` is zero.

    Newton-Raphson on ``f(r) = sum(flow_t / (1 + r) ** t)`` with
    ``f'(r) = sum(-t * flow_t / (1 + r) ** (t + 1))``, where ``t`` is the
    position of the flow in ``flows``.  There is no bracketing fallback: a
    zero derivative, a pole at ``r = -1``, float overflow or a non-finite
    iterate stop the search and the solution is flagged as not converged.

    Parameters
    ----------
    flows:
        Cash flows at consecutive periods 0..n.
    guess:
        Starting rate as a decimal.
    precision:
        Stop when two successive iterates differ by less than this.
    max_iterations:
        Upper bound on Newton steps.

    Returns
    -------
    IrrSolution
        Rate as a decimal, number of steps taken and a convergence flag.
    """
    rate = guess
    for i in range(1, max_iterations + 1):
        try:
            growth = 1.0 + rate
            f = 0.0
            df = 0.0
            for t, flow in enumerate(flows):
                f += flow / growth ** t
                df -= t * flow / growth ** (t + 1)
            new_rate = rate - f / df
        except (ZeroDivisionError, OverflowError):
            return IrrSolution(rate=rate, iterations=i, converged=False)
        if not math.isfinite(new_rate):
            return IrrSolution(rate=rate, iterations=i, converged=False)
        if abs(new_rate - rate) < precision:
            return IrrSolution(rate=new_rate, iterations=i, converged=True)
        rate = new_rate
    return IrrSolution(rate=rate, iterations=max_iterations, converged=False)


def compute_irr(record: InvestmentRecord) -> float:
    """Internal rate of return in percent, or ``0`` if the search fails.

    Note that the cash flows are placed at consecutive periods 1..n by
    their position in ``record.cash_flows``; the declared ``period`` field
    is ignored here, whereas :func:`compute_npv` uses it.  For records with
    gaps or unordered periods the two indicators therefore disagree on
    timing.
    """
    return solve_irr(irr_flows(record)).percent


def compute_payback(record: InvestmentRecord) -> float:
    """Estimate the payback period for an investment.

    The running balance starts at ``-initial_investment``.  At the first
    entry that brings it to zero or above, the result is the entry's
    0-based index plus the fraction of that entry needed to close the gap
    (uniform inflow within the period).

    A zero amount can only close the gap when the balance was already
    non-negative, so its fractional part is taken as zero.

    Returns
    -------
    float
        Payback in periods, or ``-1`` if never recovered.
    """
    balance = -record.initial_investment
    for i, cf in enumerate(record.cash_flows):
        before = balance
        balance += cf.amount
        if balance >= 0.0:
            if cf.amount == 0:
                return float(i)
            return i + abs(before) / cf.amount
    return NOT_RECOVERED


def compute_roi(record: InvestmentRecord) -> float:
    """Return on investment in percent.

    With a zero investment the ratio is a signed infinity, or ``0`` when
    the cash flows also sum to zero.
    """
    gain = total_revenue(record) - record.initial_investment
    return _ratio(gain, record.initial_investment) * 100.0


def compute_profitability_index(
    record: InvestmentRecord, npv: Optional[float] = None
) -> float:
    """Present value of the inflows per unit invested.

    ``npv`` may be passed in to avoid recomputing it.  Division by a zero
    investment follows the same policy as :func:`compute_roi`.
    """
    if npv is None:
        npv = compute_npv(record)
    return _ratio(npv + record.initial_investment, record.initial_investment)


def get_full_metrics(record: InvestmentRecord) -> FinancialMetrics:
    """Compute every dashboard indicator for ``record``."""
    npv = compute_npv(record)
    solution = solve_irr(irr_flows(record))
    return FinancialMetrics(
        npv=npv,
        irr=solution.percent,
        roi=compute_roi(record),
        payback=compute_payback(record),
        total_revenue=total_revenue(record),
        profitability_index=compute_profitability_index(record, npv),
        irr_converged=solution.converged,
    )
