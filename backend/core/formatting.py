"""Display helpers: rupee formatting, error wording and report rows."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Union

from backend.domain.errors import ErrorKind, FieldErrors, FieldIssue, FieldName
from backend.models import ProjectionResult

TAX_NOTE = (
    "Reminder: Your SSY Investment is Tax-Free! The SSY scheme has an "
    "Exempt-Exempt-Exempt (EEE) status, meaning the contribution, interest, "
    "and maturity amount are all tax-free."
)

TABLE_HEADER = ["Year", "Age", "Monthly", "Yearly", "Withdrawal", "Interest", "Balance"]


def format_indian_number(value: float) -> str:
    """Whole number with Indian digit grouping: 1234567 -> '12,34,567'."""
    # half away from zero, like the browser's Intl formatter
    rounded = int(math.floor(abs(value) + 0.5))
    digits = str(rounded)
    sign = "-" if value < 0 and rounded != 0 else ""

    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def format_currency(value: float) -> str:
    text = format_indian_number(value)
    if text.startswith("-"):
        return "-₹" + text[1:]
    return "₹" + text


def render_message(issue: FieldIssue) -> str:
    params = issue.params
    kind = issue.kind

    if kind == ErrorKind.INVALID_NUMBER:
        if issue.field in (FieldName.AGE, FieldName.WITHDRAWAL_AGE):
            return "Please enter a valid age."
        return "Please enter a valid amount."

    if kind == ErrorKind.INVESTMENT_OUT_OF_RANGE:
        if params.get("bound") == "min":
            return f"Yearly total must be at least {format_currency(params['limit'])}."
        return f"Yearly total cannot exceed {format_currency(params['limit'])}."

    if kind == ErrorKind.AGE_OUT_OF_RANGE:
        if params.get("bound") == "min":
            return f"Girl's age cannot be less than {params['limit']}."
        return f"Girl's age cannot be more than {params['limit']}."

    if kind == ErrorKind.WITHDRAWAL_AGE_OUT_OF_RANGE:
        return f"Withdrawal age must be between {params['low']} and {params['high']}."

    if kind == ErrorKind.WITHDRAWAL_AMOUNT_NOT_POSITIVE:
        return "Withdrawal amount must be positive."

    # WITHDRAWAL_EXCEEDS_LIMIT
    percent = params.get("percent", 50)
    return (
        f"Amount cannot exceed {percent}% of the balance "
        f"(Max: {format_currency(params['maximum'])})."
    )


def field_errors(issues: Iterable[FieldIssue]) -> FieldErrors:
    """Collapse issues into one message per field; the first issue for a field wins."""
    slots: Dict[str, str] = {}
    for issue in issues:
        slots.setdefault(issue.field.value, render_message(issue))
    return FieldErrors(**slots)


def summary_lines(result: ProjectionResult) -> List[str]:
    lines = [
        f"Total Investment: {format_currency(result.total_investment)}",
        f"Total Interest Earned: {format_currency(result.total_interest)}",
    ]
    if result.has_withdrawal:
        lines.append(f"Amount Withdrawn: {format_currency(result.total_withdrawal)}")
    lines.append(f"Final Maturity Value: {format_currency(result.maturity_value)}")
    return lines


def table_rows(result: ProjectionResult) -> List[List[str]]:
    """Header plus one row per year, every amount rendered as rupees."""
    rows = [list(TABLE_HEADER)]
    for record in result.yearly_data:
        rows.append(
            [
                str(record.year),
                str(record.age),
                format_currency(record.monthly_investment),
                format_currency(record.investment),
                format_currency(record.withdrawal),
                format_currency(record.interest),
                format_currency(record.closing_balance),
            ]
        )
    return rows


def chart_series(result: ProjectionResult) -> List[Dict[str, Union[int, float]]]:
    return [
        {
            "age": record.age,
            "totalInvestment": record.total_investment,
            "closingBalance": record.closing_balance,
        }
        for record in result.yearly_data
    ]
