"""
Input rules for the calculator.

Each field has one rule function. The field-level check (run as the user
types) and the full check (run when the projection is requested) are both
built from these, so the two can never disagree. Rules return a FieldIssue
instead of raising; wording is done by backend.core.formatting.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Union

from backend.core.config import DEFAULT_SCHEME, SchemeConfig
from backend.core.projection import withdrawal_cap
from backend.domain.errors import ErrorKind, FieldIssue, FieldName
from backend.models import ProjectionInputs
from backend.schemas.projection import RawInputs


def parse_number(raw: Any) -> Optional[float]:
    """Return the numeric value of a form field, or None if it isn't a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_whole(raw: Any) -> Optional[int]:
    value = parse_number(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def _invalid(field: FieldName) -> FieldIssue:
    return FieldIssue(field=field, kind=ErrorKind.INVALID_NUMBER)


def check_investment(raw: Any, scheme: SchemeConfig = DEFAULT_SCHEME) -> Optional[FieldIssue]:
    monthly = parse_number(raw)
    if monthly is None:
        return _invalid(FieldName.INVESTMENT)

    yearly = monthly * 12
    if yearly < scheme.min_investment:
        return FieldIssue(
            field=FieldName.INVESTMENT,
            kind=ErrorKind.INVESTMENT_OUT_OF_RANGE,
            params={"bound": "min", "limit": scheme.min_investment},
        )
    if yearly > scheme.max_investment:
        return FieldIssue(
            field=FieldName.INVESTMENT,
            kind=ErrorKind.INVESTMENT_OUT_OF_RANGE,
            params={"bound": "max", "limit": scheme.max_investment},
        )
    return None


def check_girl_age(raw: Any, scheme: SchemeConfig = DEFAULT_SCHEME) -> Optional[FieldIssue]:
    age = _parse_whole(raw)
    if age is None:
        return _invalid(FieldName.AGE)

    if age < scheme.min_girl_age:
        return FieldIssue(
            field=FieldName.AGE,
            kind=ErrorKind.AGE_OUT_OF_RANGE,
            params={"bound": "min", "limit": scheme.min_girl_age},
        )
    if age > scheme.max_girl_age:
        return FieldIssue(
            field=FieldName.AGE,
            kind=ErrorKind.AGE_OUT_OF_RANGE,
            params={"bound": "max", "limit": scheme.max_girl_age},
        )
    return None


def check_withdrawal_age(raw: Any, scheme: SchemeConfig = DEFAULT_SCHEME) -> Optional[FieldIssue]:
    age = _parse_whole(raw)
    if age is None:
        return _invalid(FieldName.WITHDRAWAL_AGE)

    # the upper bound is compared against the maturity period, not an age
    if age < scheme.min_withdrawal_age or age >= scheme.maturity_period_years:
        return FieldIssue(
            field=FieldName.WITHDRAWAL_AGE,
            kind=ErrorKind.WITHDRAWAL_AGE_OUT_OF_RANGE,
            params={"low": scheme.min_withdrawal_age, "high": scheme.maturity_period_years - 1},
        )
    return None


def check_withdrawal_amount(raw: Any) -> Optional[FieldIssue]:
    amount = parse_number(raw)
    if amount is None:
        return _invalid(FieldName.WITHDRAWAL_AMOUNT)
    if amount <= 0:
        return FieldIssue(field=FieldName.WITHDRAWAL_AMOUNT, kind=ErrorKind.WITHDRAWAL_AMOUNT_NOT_POSITIVE)
    return None


def check_withdrawal_limit(
    inputs: ProjectionInputs, scheme: SchemeConfig = DEFAULT_SCHEME
) -> Optional[FieldIssue]:
    cap = withdrawal_cap(inputs, scheme)
    if inputs.withdrawal_amount > cap:
        return FieldIssue(
            field=FieldName.WITHDRAWAL_AMOUNT,
            kind=ErrorKind.WITHDRAWAL_EXCEEDS_LIMIT,
            params={
                "maximum": math.floor(cap),
                "percent": round(scheme.withdrawal_limit_fraction * 100),
            },
        )
    return None


def _coerce(raw: Union[RawInputs, dict]) -> RawInputs:
    if isinstance(raw, RawInputs):
        return raw
    return RawInputs.model_validate(raw)


def validate_fields(
    raw: Union[RawInputs, dict], scheme: SchemeConfig = DEFAULT_SCHEME
) -> List[FieldIssue]:
    """Immediate per-field feedback. Never runs the withdrawal-limit pre-pass."""
    raw = _coerce(raw)
    checks = [
        check_investment(raw.monthly_investment, scheme),
        check_girl_age(raw.girl_age, scheme),
    ]
    if raw.is_withdrawal_enabled:
        checks.append(check_withdrawal_age(raw.withdrawal_age, scheme))
        checks.append(check_withdrawal_amount(raw.withdrawal_amount))
    return [issue for issue in checks if issue is not None]


def validate_inputs(
    raw: Union[RawInputs, dict], scheme: SchemeConfig = DEFAULT_SCHEME
) -> Union[ProjectionInputs, List[FieldIssue]]:
    """
    Full check run when a projection is requested.

    Stops at the first failing stage:
      1) investment and girl's age,
      2) withdrawal age and amount (only when withdrawal is enabled),
      3) the 50% withdrawal limit, which needs stages 1-2 to have passed.
    """
    raw = _coerce(raw)

    issues = [
        issue
        for issue in (check_investment(raw.monthly_investment, scheme), check_girl_age(raw.girl_age, scheme))
        if issue is not None
    ]
    if issues:
        return issues

    monthly = parse_number(raw.monthly_investment)
    girl_age = _parse_whole(raw.girl_age)

    if not raw.is_withdrawal_enabled:
        return ProjectionInputs(monthly_investment=monthly, girl_age=girl_age)

    issues = [
        issue
        for issue in (
            check_withdrawal_age(raw.withdrawal_age, scheme),
            check_withdrawal_amount(raw.withdrawal_amount),
        )
        if issue is not None
    ]
    if issues:
        return issues

    inputs = ProjectionInputs(
        monthly_investment=monthly,
        girl_age=girl_age,
        is_withdrawal_enabled=True,
        withdrawal_age=_parse_whole(raw.withdrawal_age),
        withdrawal_amount=parse_number(raw.withdrawal_amount),
    )
    limit_issue = check_withdrawal_limit(inputs, scheme)
    if limit_issue is not None:
        return [limit_issue]
    return inputs
