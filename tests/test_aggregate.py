"""Tests for the cash flow table.

The table must agree with the metrics engine: its last cumulative
present value is the NPV and its last cumulative balance is the
undiscounted net gain.
"""

import math

from appraisal.aggregate import COLUMNS, cashflow_table
from appraisal.economics import compute_npv, total_revenue
from appraisal.state import add_period


def test_table_layout(reference_record):
    df = cashflow_table(reference_record)
    assert list(df.columns) == COLUMNS
    assert list(df["label"]) == ["Inv.", "P1", "P2", "P3", "P4", "P5"]
    assert list(df["period"]) == [0, 1, 2, 3, 4, 5]
    assert df.loc[0, "cash"] == -5_000_000
    assert df.loc[0, "discount_factor"] == 1.0


def test_table_matches_metrics(reference_record):
    df = cashflow_table(reference_record)
    assert math.isclose(df["cumulative_present_value"].iloc[-1], compute_npv(reference_record), rel_tol=1e-9)
    expected_gain = total_revenue(reference_record) - reference_record.initial_investment
    assert math.isclose(df["cumulative"].iloc[-1], expected_gain)
    # first crossing of zero happens at P4
    assert list(df["cumulative"] >= 0) == [False, False, False, False, True, True]


def test_table_without_cash_flows(make_record):
    df = cashflow_table(make_record(investment=10.0))
    assert len(df) == 1
    assert df.loc[0, "cumulative"] == -10.0


def test_table_follows_added_period(reference_record):
    df = cashflow_table(add_period(reference_record))
    assert df["label"].iloc[-1] == "P6"
    assert df["cash"].iloc[-1] == 0.0
