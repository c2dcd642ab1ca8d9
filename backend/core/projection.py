from __future__ import annotations

from functools import partial, reduce
from typing import Tuple

from backend.core.config import DEFAULT_SCHEME, SchemeConfig
from backend.models import ProjectionInputs, ProjectionResult, YearlyRecord


def compound_year(opening: float, contribution: float, rate: float) -> Tuple[float, float]:
    """
    One year of the scheme's compounding rule, returned as (interest, closing).

    The year's contribution earns a full year of interest, so interest is
    charged on opening + contribution rather than on the opening balance alone.
    """
    interest = (opening + contribution) * rate
    return interest, opening + contribution + interest


def balance_before_year(
    yearly_investment: float,
    year: int,
    scheme: SchemeConfig = DEFAULT_SCHEME,
) -> float:
    """Balance accrued over years 1..year-1 with no withdrawal applied."""

    def step(balance: float, i: int) -> float:
        contribution = scheme.contribution_for_year(i, yearly_investment)
        _, closing = compound_year(balance, contribution, scheme.interest_rate)
        return closing

    return reduce(step, range(1, year), 0.0)


def withdrawal_cap(inputs: ProjectionInputs, scheme: SchemeConfig = DEFAULT_SCHEME) -> float:
    """
    Largest permissible withdrawal: a fixed fraction of the balance accrued
    before the withdrawal year. The withdrawal year's own contribution and
    interest are not counted. A withdrawal year of 1 or less gives a cap of 0.
    """
    balance = balance_before_year(inputs.yearly_investment, inputs.withdrawal_year, scheme)
    return balance * scheme.withdrawal_limit_fraction


def _advance(
    records: Tuple[YearlyRecord, ...],
    year: int,
    *,
    inputs: ProjectionInputs,
    scheme: SchemeConfig,
) -> Tuple[YearlyRecord, ...]:
    opening = records[-1].closing_balance if records else 0.0
    invested_so_far = records[-1].total_investment if records else 0.0

    age = inputs.girl_age + year
    year_contribution = scheme.contribution_for_year(year, inputs.yearly_investment)
    month_contribution = scheme.contribution_for_year(year, inputs.monthly_investment)

    interest, closing = compound_year(opening, year_contribution, scheme.interest_rate)

    withdrawal = 0.0
    if inputs.is_withdrawal_enabled and age == inputs.withdrawal_age:
        withdrawal = inputs.withdrawal_amount
        closing -= withdrawal

    record = YearlyRecord(
        year=year,
        age=age,
        monthly_investment=month_contribution,
        investment=year_contribution,
        interest=interest,
        withdrawal=withdrawal,
        total_investment=invested_so_far + year_contribution,
        closing_balance=closing,
    )
    return records + (record,)


def simulate(inputs: ProjectionInputs, scheme: SchemeConfig = DEFAULT_SCHEME) -> ProjectionResult:
    """
    Build the year-by-year table for already-validated inputs.

    Order of operations (per year i = 1..maturity period):
      1) Contribution for the year (zero once the deposit period is over).
      2) Interest on opening balance + contribution.
      3) Subtract the withdrawal if this is the withdrawal age.
    Each year's closing balance opens the next one.
    """
    records: Tuple[YearlyRecord, ...] = reduce(
        partial(_advance, inputs=inputs, scheme=scheme),
        range(1, scheme.maturity_period_years + 1),
        (),
    )

    maturity_value = records[-1].closing_balance if records else 0.0
    total_investment = records[-1].total_investment if records else 0.0
    total_withdrawal = sum(r.withdrawal for r in records)

    return ProjectionResult(
        yearly_data=records,
        total_investment=total_investment,
        # derived so interest is never counted twice
        total_interest=maturity_value + total_withdrawal - total_investment,
        total_withdrawal=total_withdrawal,
        maturity_value=maturity_value,
    )


__all__ = [
    "compound_year",
    "balance_before_year",
    "withdrawal_cap",
    "simulate",
]
