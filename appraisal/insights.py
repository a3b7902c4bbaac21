# MIT License
"""LLM-written executive summary of an investment appraisal.

:class:`InsightClient` turns a record and its metrics into a prompt and
asks an OpenAI chat model for a short narrative.  There is no retry: any
failure surfaces as :class:`InsightError` and the page replaces it with a
fixed message.
"""
from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError

from .config import Settings
from .currency import format_number, get_currency
from .params import CurrencyCode, FinancialMetrics, InvestmentRecord

logger = logging.getLogger(__name__)

EMPTY_RESPONSE = "No insights at the moment."
FALLBACK_MESSAGE = "Could not reach the AI analyst. Check your connection and API key."


class InsightError(RuntimeError):
    """The narrative could not be produced."""


def _payback_text(payback: float) -> str:
    if payback == -1:
        return "not recoverable within the horizon"
    return f"{payback:.1f} periods"


def build_prompt(record: InvestmentRecord, metrics: FinancialMetrics) -> str:
    """Fill the analyst prompt with the record's figures."""
    cfg = get_currency(record.currency)
    code = record.currency
    irr = f"{metrics.irr:.2f}%"
    if not metrics.irr_converged:
        irr += " (solver did not converge; treat as unavailable)"
    context = ""
    if record.currency == CurrencyCode.AOA:
        context = "The figures are in kwanza: take the inflationary context and the exchange rate into account where appropriate.\n"

    return f"""
Act as a senior financial analyst covering Angolan and international markets.
Analyse the figures below and write a high-level executive summary.

Financial context ({code.value}):
- Investment: {cfg.symbol} {format_number(record.initial_investment, code)}
- NPV: {cfg.symbol} {format_number(metrics.npv, code)}
- IRR: {irr} (discount rate {record.discount_rate:g}%)
- Payback: {_payback_text(metrics.payback)}
- ROI: {metrics.roi:.2f}%
- Profitability index: {metrics.profitability_index:.2f}

{context}Be elegant and direct, in the tone of a premium consultancy. Keep it to 3 short paragraphs.
""".strip()


class InsightClient:
    """Requests narrative summaries from an OpenAI chat model.

    Parameters
    ----------
    api_key:
        OpenAI credential.  A missing key fails at request time, not here.
    model:
        Chat model identifier.
    temperature:
        Sampling temperature.
    client:
        Preconfigured client; built from ``api_key`` when omitted.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        temperature: float = 0.4,
        client: Any | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = float(temperature)
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "InsightClient":
        return cls(api_key=settings.openai_api_key, model=settings.openai_model, **kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise InsightError("Missing OPENAI_API_KEY in environment / .env")
            self._client = OpenAI(api_key=self._api_key)
        return self._client

    def request_analysis(self, record: InvestmentRecord, metrics: FinancialMetrics) -> str:
        """Return the model's summary of ``record`` and ``metrics``.

        Raises
        ------
        InsightError
            If no credential is configured or the service call fails.
        """
        client = self._get_client()
        prompt = build_prompt(record, metrics)
        try:
            resp = client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
        except OpenAIError as e:
            logger.error("AI connection error: %s", e)
            raise InsightError(str(e)) from e
        if not resp.choices:
            return EMPTY_RESPONSE
        text = (resp.choices[0].message.content or "").strip()
        return text or EMPTY_RESPONSE
