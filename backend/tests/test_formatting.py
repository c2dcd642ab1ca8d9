from __future__ import annotations

import pytest

from backend.core.formatting import (
    TABLE_HEADER,
    chart_series,
    field_errors,
    format_currency,
    format_indian_number,
    render_message,
    summary_lines,
    table_rows,
)
from backend.core.projection import simulate
from backend.domain.errors import ErrorKind, FieldIssue, FieldName
from backend.models import ProjectionInputs


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (150000, "1,50,000"),
        (1234567, "12,34,567"),
        (12345678, "1,23,45,678"),
        (51936.4, "51,936"),
        (51936.5, "51,937"),
        (-2500, "-2,500"),
        (-0.2, "0"),
    ],
)
def test_format_indian_number(value, expected):
    assert format_indian_number(value) == expected


def test_format_currency():
    assert format_currency(0) == "₹0"
    assert format_currency(250) == "₹250"
    assert format_currency(774883) == "₹7,74,883"
    assert format_currency(-1500) == "-₹1,500"


@pytest.mark.parametrize(
    "issue, message",
    [
        (FieldIssue(field=FieldName.INVESTMENT, kind=ErrorKind.INVALID_NUMBER), "Please enter a valid amount."),
        (FieldIssue(field=FieldName.AGE, kind=ErrorKind.INVALID_NUMBER), "Please enter a valid age."),
        (
            FieldIssue(field=FieldName.INVESTMENT, kind=ErrorKind.INVESTMENT_OUT_OF_RANGE, params={"bound": "min", "limit": 250}),
            "Yearly total must be at least ₹250.",
        ),
        (
            FieldIssue(field=FieldName.INVESTMENT, kind=ErrorKind.INVESTMENT_OUT_OF_RANGE, params={"bound": "max", "limit": 150000}),
            "Yearly total cannot exceed ₹1,50,000.",
        ),
        (
            FieldIssue(field=FieldName.AGE, kind=ErrorKind.AGE_OUT_OF_RANGE, params={"bound": "min", "limit": 0}),
            "Girl's age cannot be less than 0.",
        ),
        (
            FieldIssue(field=FieldName.WITHDRAWAL_AGE, kind=ErrorKind.WITHDRAWAL_AGE_OUT_OF_RANGE, params={"low": 18, "high": 20}),
            "Withdrawal age must be between 18 and 20.",
        ),
        (
            FieldIssue(field=FieldName.WITHDRAWAL_AMOUNT, kind=ErrorKind.WITHDRAWAL_AMOUNT_NOT_POSITIVE),
            "Withdrawal amount must be positive.",
        ),
        (
            FieldIssue(
                field=FieldName.WITHDRAWAL_AMOUNT,
                kind=ErrorKind.WITHDRAWAL_EXCEEDS_LIMIT,
                params={"maximum": 774883, "percent": 50},
            ),
            "Amount cannot exceed 50% of the balance (Max: ₹7,74,883).",
        ),
    ],
)
def test_render_message(issue, message):
    assert render_message(issue) == message


def test_field_errors_keeps_first_issue_per_field():
    errors = field_errors(
        [
            FieldIssue(field=FieldName.AGE, kind=ErrorKind.INVALID_NUMBER),
            FieldIssue(field=FieldName.AGE, kind=ErrorKind.AGE_OUT_OF_RANGE, params={"bound": "max", "limit": 10}),
        ]
    )
    assert errors.age == "Please enter a valid age."
    assert errors.investment is None
    assert errors.has_errors
    assert not field_errors([]).has_errors


def test_summary_and_table_for_plain_projection():
    result = simulate(ProjectionInputs(monthly_investment=4000.0, girl_age=1))

    lines = summary_lines(result)
    assert lines[0] == "Total Investment: ₹7,20,000"
    assert lines[-1] == "Final Maturity Value: ₹22,98,278"
    assert not any(line.startswith("Amount Withdrawn") for line in lines)

    rows = table_rows(result)
    assert rows[0] == TABLE_HEADER
    assert len(rows) == 22
    assert rows[1] == ["1", "2", "₹4,000", "₹48,000", "₹0", "₹3,936", "₹51,936"]


def test_summary_mentions_withdrawal_when_taken():
    result = simulate(
        ProjectionInputs(
            monthly_investment=4000.0, girl_age=1, is_withdrawal_enabled=True, withdrawal_age=18, withdrawal_amount=100000
        )
    )
    assert "Amount Withdrawn: ₹1,00,000" in summary_lines(result)


def test_chart_series_follows_age():
    result = simulate(ProjectionInputs(monthly_investment=1000.0, girl_age=5))
    points = chart_series(result)
    assert [p["age"] for p in points] == list(range(6, 27))
    assert points[0] == {"age": 6, "totalInvestment": 12000.0, "closingBalance": result.yearly_data[0].closing_balance}
