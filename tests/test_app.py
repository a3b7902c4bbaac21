"""Page tests for the dashboard, driven through Streamlit's AppTest harness.

Each test points the snapshot store at a temporary file, so the page
loads whatever record the test saved there first.
"""

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from appraisal.insights import FALLBACK_MESSAGE, InsightClient, InsightError
from appraisal.params import CashFlowEntry
from appraisal.state import default_record, set_discount_rate, update_cash_flow
from appraisal.storage import LocalStore, RecordRepository


@pytest.fixture
def app_repository(tmp_path, monkeypatch) -> RecordRepository:
    path = tmp_path / "local_storage.json"
    monkeypatch.setenv("APPRAISAL_STORAGE_PATH", str(path))
    monkeypatch.setenv("APPRAISAL_STORAGE_KEY", "page_record")
    return RecordRepository(LocalStore(path), "page_record")


def _app() -> AppTest:
    return AppTest.from_file("../app.py", default_timeout=30)


def test_first_render_leaves_snapshot_untouched(app_repository):
    rec = set_discount_rate(default_record(), 7.125)
    rec = update_cash_flow(rec, 0, 1_000_000.005)
    app_repository.save(rec)

    at = _app().run()

    assert not at.exception
    assert at.text_input(key="rate_0").value == "7.125"
    assert at.session_state["record"] == rec
    assert app_repository.load() == rec


def test_edit_is_committed_and_saved(app_repository):
    app_repository.save(default_record())
    at = _app().run()

    at.text_input(key="rate_0").input("12,5").run()

    assert at.session_state["record"].discount_rate == 12.5
    assert app_repository.load().discount_rate == 12.5


def test_add_period_appends_zero_flow(app_repository):
    app_repository.save(default_record())
    at = _app().run()

    at.button(key="add_period").click().run()

    rec = at.session_state["record"]
    assert rec.horizon == 6
    assert rec.cash_flows[-1] == CashFlowEntry(period=6, amount=0.0)
    assert app_repository.load() == rec
    assert at.text_input(key="flow_1_5").label == "P6 (AOA)"
    assert at.text_input(key="flow_1_5").value == "0"


def test_analysis_runs_with_flag_raised(app_repository, monkeypatch):
    seen = []

    def fake_request(self, record, metrics):
        seen.append(st.session_state.loading_ai)
        return "Solid project.\nWatch the exchange rate."

    monkeypatch.setattr(InsightClient, "request_analysis", fake_request)
    at = _app().run()
    assert not at.button(key="ask_ai").disabled

    at.button(key="ask_ai").click().run()

    assert seen == [True]
    assert at.session_state["loading_ai"] is False
    assert at.session_state["ai_analysis"].startswith("Solid project.")
    assert not at.button(key="ask_ai").disabled
    assert any("Watch the exchange rate." in md.value for md in at.markdown)


def test_button_disabled_while_loading(app_repository, monkeypatch):
    def failing_request(self, record, metrics):
        raise RuntimeError("connection dropped")

    monkeypatch.setattr(InsightClient, "request_analysis", failing_request)
    at = _app()
    at.session_state["loading_ai"] = True
    at.run()

    # The run stopped inside the request, so its button is still on screen.
    assert at.exception
    assert at.button(key="ask_ai").disabled
    assert at.session_state["loading_ai"] is False


def test_service_failure_shows_fallback(app_repository, monkeypatch):
    def unavailable(self, record, metrics):
        raise InsightError("no credential")

    monkeypatch.setattr(InsightClient, "request_analysis", unavailable)
    at = _app().run()
    at.button(key="ask_ai").click().run()

    assert at.session_state["ai_analysis"] == FALLBACK_MESSAGE
    assert at.session_state["loading_ai"] is False
