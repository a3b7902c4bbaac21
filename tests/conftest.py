"""
Pytest configuration and shared fixtures for the dashboard tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from appraisal.params import CashFlowEntry, CurrencyCode, InvestmentRecord
from appraisal.state import default_record
from appraisal.storage import LocalStore, RecordRepository


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def reference_record() -> InvestmentRecord:
    """5,000,000 invested, flows of 1.0M..3.0M over periods 1-5, 15% rate."""
    return default_record()


@pytest.fixture
def make_record():
    """Factory for records whose flows sit at periods 1..n."""
    def _make(investment=0.0, rate=0.0, amounts=(), currency=CurrencyCode.USD):
        return InvestmentRecord(
            initial_investment=investment,
            discount_rate=rate,
            currency=currency,
            cash_flows=[CashFlowEntry(period=i, amount=a) for i, a in enumerate(amounts, start=1)],
        )
    return _make


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def store(tmp_path) -> LocalStore:
    return LocalStore(tmp_path / "local_storage.json")


@pytest.fixture
def repository(store) -> RecordRepository:
    return RecordRepository(store, "test_record")


# =============================================================================
# Mock API Client Fixtures
# =============================================================================

def make_completion(content):
    """Shape of an OpenAI chat completion with a single choice."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def mock_openai_client() -> MagicMock:
    """Mock OpenAI client answering every request with a fixed narrative."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(
        "  Strong project.\nIRR clears the hurdle.  "
    )
    return client
