"""Spend record and classification payloads shared across pipeline stages."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class _Payload(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SpendRecord(_Payload):
    """A spend line from the source system."""

    id: str
    vendor: str
    description: str
    amount: float = 0.0
    date: str | None = None
    department: str | None = None
    cost_center: str | None = None
    po_number: str | None = None
    invoice_number: str | None = None
    raw_text: str | None = None


class ClassificationJudgment(_Payload):
    """Structured output returned by the classification agent."""

    unspsc_code: str
    unspsc_title: str
    segment: str | None = None
    family: str | None = None
    confidence: float = 50.0
    reasoning: str = ""


class Classification(_Payload):
    """UNSPSC classification assigned to a record."""

    record_id: str
    unspsc_code: str
    unspsc_title: str
    segment: str | None = None
    family: str | None = None
    confidence: float = Field(ge=0, le=100)
    reasoning: str
    classified_at: str = Field(default_factory=utc_now_iso)
    classified_by: str = "classification-agent"


class StepError(_Payload):
    """Recoverable or fatal failure recorded by a pipeline step."""

    agent_type: Literal[
        "extraction", "classification", "qa", "hitl", "analysis", "supervisor"
    ]
    code: str
    message: str
    recoverable: bool = True
    retry_count: int = 0
    max_retries: int = 3
    occurred_at: str = Field(default_factory=utc_now_iso)


__all__ = [
    "Classification",
    "ClassificationJudgment",
    "SpendRecord",
    "StepError",
    "utc_now_iso",
]
