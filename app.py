"""Streamlit entry point for the investment appraisal dashboard.

The sidebar holds the investment inputs; the main area shows the metric
cards, the cumulative cash flow chart and the AI analyst's narrative.
The edited record lives in `st.session_state["record"]` and is
snapshotted to the local store after every change.
"""

from __future__ import annotations

import logging

import streamlit as st

from appraisal.aggregate import cashflow_table
from appraisal.cards import build_metric_cards
from appraisal.config import configure_logging, load_settings
from appraisal.currency import CURRENCIES, get_currency
from appraisal.economics import get_full_metrics
from appraisal.insights import FALLBACK_MESSAGE, InsightClient, InsightError
from appraisal.params import InvestmentRecord
from appraisal.plots import fig_cashflow, fig_cumulative_cashflow
from appraisal.state import (
    add_period,
    default_record,
    remove_last_period,
    set_currency,
    set_discount_rate,
    set_initial_investment,
    update_cash_flow,
)
from appraisal.storage import LocalStore, RecordRepository
from appraisal.validation import parse_number

st.set_page_config(page_title="Investment Appraisal Dashboard", layout="wide")

logger = logging.getLogger(__name__)

DELTA_COLOR = {"up": "normal", "down": "inverse", "neutral": "off"}


def _input_text(value: float) -> str:
    return format(value, ".15g")


def _repository() -> RecordRepository:
    settings = load_settings()
    return RecordRepository(LocalStore(settings.storage_path), settings.storage_key)


def _commit(record: InvestmentRecord) -> None:
    """Make ``record`` current and snapshot it."""
    st.session_state.record = record
    _repository().save(record)


def _number_field(label: str, value: float, key: str, allow_negative: bool = True) -> float:
    shown = _input_text(value)
    raw = st.text_input(label, value=shown, key=key)
    # Untouched text keeps the stored value bit for bit.
    if raw == shown:
        return value
    parsed = parse_number(raw, allow_negative=allow_negative)
    if not parsed.ok:
        st.caption(f":orange[{parsed.hint}]")
    return parsed.value


def _sidebar(record: InvestmentRecord) -> InvestmentRecord:
    """Render the input form and return the record it describes."""
    v = st.session_state.form_version
    codes = list(CURRENCIES)
    st.sidebar.header("Input parameters")
    code = st.sidebar.radio(
        "Currency",
        codes,
        index=codes.index(record.currency),
        format_func=lambda c: f"{c.value} ({CURRENCIES[c].symbol})",
        horizontal=True,
        key=f"currency_{v}",
    )
    symbol = get_currency(code).symbol
    with st.sidebar:
        investment = _number_field(
            f"Initial investment ({symbol})",
            record.initial_investment,
            key=f"investment_{v}",
            allow_negative=False,
        )
        rate = _number_field("Discount rate (%)", record.discount_rate, key=f"rate_{v}")

        st.subheader("Cash flow per period")
        edited = set_currency(record, code)
        edited = set_initial_investment(edited, investment)
        edited = set_discount_rate(edited, rate)
        for i, cf in enumerate(record.cash_flows):
            amount = _number_field(f"P{cf.period} ({code.value})", cf.amount, key=f"flow_{v}_{i}")
            edited = update_cash_flow(edited, i, amount)

        col_add, col_remove = st.columns(2)
        if col_add.button("+ Add period", key="add_period", use_container_width=True):
            st.session_state.form_version += 1
            _commit(add_period(edited))
            st.rerun()
        if col_remove.button("Remove last", use_container_width=True, disabled=not record.cash_flows):
            st.session_state.form_version += 1
            _commit(remove_last_period(edited))
            st.rerun()
        if st.button("Reset to defaults", use_container_width=True):
            st.session_state.form_version += 1
            _commit(default_record())
            st.rerun()
    return edited


def _metric_cards(record, metrics) -> None:
    cards = build_metric_cards(record, metrics)
    for col, card in zip(st.columns(len(cards)), cards):
        col.metric(
            card.label,
            card.value,
            delta=card.trend_text,
            delta_color=DELTA_COLOR[card.trend],
            help=card.description,
        )


def _start_request() -> None:
    st.session_state.loading_ai = True


def _insight_panel(record, metrics) -> None:
    """AI narrative panel.

    The click only raises ``loading_ai``; the request runs in the next
    script run, with the button already drawn disabled, and the page is
    rerun once the answer is stored.
    """
    st.subheader("Intelligence report")
    st.button(
        "Ask the AI analyst",
        key="ask_ai",
        on_click=_start_request,
        disabled=st.session_state.loading_ai,
    )
    if st.session_state.loading_ai:
        client = InsightClient.from_settings(load_settings())
        try:
            with st.spinner("Consulting the AI analyst..."):
                st.session_state.ai_analysis = client.request_analysis(record, metrics)
        except InsightError as e:
            logger.warning("AI analysis unavailable: %s", e)
            st.session_state.ai_analysis = FALLBACK_MESSAGE
        finally:
            st.session_state.loading_ai = False
        st.rerun()

    if st.session_state.ai_analysis:
        for para in st.session_state.ai_analysis.split("\n"):
            if para.strip():
                st.markdown(f"_{para.strip()}_")
    else:
        st.caption(
            "Offline analysis available. Ask the AI analyst for a strategic "
            "reading of the figures above."
        )


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    # --- SESSION SETUP ------------------------------------------------------
    if "record" not in st.session_state:
        st.session_state.record = _repository().load_or_default()
        logger.info("Loaded record with %d cash flows", st.session_state.record.horizon)
    st.session_state.setdefault("form_version", 0)
    st.session_state.setdefault("ai_analysis", "")
    st.session_state.setdefault("loading_ai", False)

    record = _sidebar(st.session_state.record)
    if record != st.session_state.record:
        _commit(record)

    metrics = get_full_metrics(record)
    df = cashflow_table(record)

    # --- MAIN PAGE ----------------------------------------------------------
    st.title("Investment Appraisal Dashboard")
    st.caption("Strategic investment unit · capital budgeting indicators")

    _metric_cards(record, metrics)

    st.markdown("---")
    tab1, tab2, tab3 = st.tabs(["Cumulative balance", "Cash flow per period", "Table"])
    with tab1:
        st.plotly_chart(fig_cumulative_cashflow(df, record.currency), use_container_width=True)
    with tab2:
        st.plotly_chart(fig_cashflow(df, record.currency), use_container_width=True)
    with tab3:
        st.dataframe(df, hide_index=True, use_container_width=True)
        col1, col2 = st.columns(2)
        col1.download_button(
            "Download cash flow table (CSV)",
            df.to_csv(index=False).encode("utf-8"),
            "cashflow_table.csv",
            "text/csv",
        )
        col2.download_button(
            "Download inputs (JSON)",
            record.to_json().encode("utf-8"),
            "investment.json",
            "application/json",
        )

    st.markdown("---")
    _insight_panel(record, metrics)


if __name__ == "__main__":
    main()
