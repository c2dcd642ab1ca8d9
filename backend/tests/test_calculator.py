from __future__ import annotations

import logging

import pytest

from backend.core.calculator import compute, project_or_raise
from backend.domain.errors import ErrorKind, FieldErrors, ProjectionValidationError
from backend.models import ProjectionResult


def test_compute_returns_result_for_valid_inputs():
    result = compute({"monthlyInvestment": 4000, "girlAge": 1})
    assert isinstance(result, ProjectionResult)
    assert len(result.yearly_data) == 21


def test_compute_returns_field_errors_without_simulating(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("simulation must not run for invalid input")

    monkeypatch.setattr("backend.core.calculator.simulate", _fail)

    errors = compute({"monthlyInvestment": 20000, "girlAge": 12})
    assert isinstance(errors, FieldErrors)
    assert errors.has_errors
    assert errors.investment == "Yearly total cannot exceed ₹1,50,000."
    assert errors.age == "Girl's age cannot be more than 10."
    assert errors.withdrawal_age is None
    assert errors.withdrawal_amount is None


def test_compute_reports_withdrawal_limit_message():
    errors = compute(
        {
            "monthlyInvestment": 4000,
            "girlAge": 1,
            "isWithdrawalEnabled": True,
            "withdrawalAge": 18,
            "withdrawalAmount": 800000,
        }
    )
    assert errors.withdrawal_amount == "Amount cannot exceed 50% of the balance (Max: ₹7,74,883)."


def test_compute_logs_outcome(caplog):
    with caplog.at_level(logging.INFO, logger="backend.core.calculator"):
        compute({"monthlyInvestment": 4000, "girlAge": 1})
        compute({"monthlyInvestment": "oops", "girlAge": 1})

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("projection computed") for m in messages)
    assert any(m == "projection rejected kinds=InvalidNumber" for m in messages)


def test_project_or_raise_carries_issues():
    with pytest.raises(ProjectionValidationError) as excinfo:
        project_or_raise({"monthlyInvestment": 10, "girlAge": 1})

    assert [issue.kind for issue in excinfo.value.issues] == [ErrorKind.INVESTMENT_OUT_OF_RANGE]
    assert str(excinfo.value) == "Yearly total must be at least ₹250."


def test_project_or_raise_matches_compute():
    payload = {"monthlyInvestment": 1500, "girlAge": 3, "isWithdrawalEnabled": True, "withdrawalAge": 20, "withdrawalAmount": 50000}
    assert project_or_raise(payload) == compute(payload)
