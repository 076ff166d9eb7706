"""Test suite for SubmitLead use case."""

from __future__ import annotations

import pytest

from caradvice.domain.errors import ValidationError
from caradvice.domain.lead import Lead
from caradvice.use_cases.submit_lead import SubmitLead, SubmitLeadResponse


def test_execute_accepts_valid_lead() -> None:
    """A lead with name and email is accepted."""
    result = SubmitLead().execute(
        Lead(name="Ana", email="ana@example.com", phone="+54 11 5555-5555", source="contacto")
    )

    assert result == SubmitLeadResponse(ok=True)


def test_execute_rejects_lead_without_email() -> None:
    """Missing contact data propagates as ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        SubmitLead().execute(Lead(name="Ana", email=" "))

    assert [entry["field"] for entry in exc_info.value.errors or []] == ["email"]
