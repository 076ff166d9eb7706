"""Tests for Lead validation."""

from __future__ import annotations

import pytest

from caradvice.domain.errors import ValidationError
from caradvice.domain.lead import Lead


def test_valid_lead_passes() -> None:
    Lead(name="Ana", email="ana@example.com").validate()


def test_missing_name_is_reported() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Lead(name="  ", email="ana@example.com").validate()

    assert exc_info.value.errors == [
        {"field": "name", "message": "Nombre es obligatorio.", "code": "REQUIRED"}
    ]


def test_missing_name_and_email_are_both_reported() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Lead(name="", email="").validate()

    error = exc_info.value
    assert error.message == "Nombre y email son obligatorios."
    assert [entry["field"] for entry in error.errors or []] == ["name", "email"]
