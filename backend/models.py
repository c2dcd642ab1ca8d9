from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ProjectionInputs(BaseModel):
    """Parsed calculator inputs; produced by validation, consumed by the engine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    monthly_investment: float = Field(ge=0)
    girl_age: int
    is_withdrawal_enabled: bool = False
    withdrawal_age: int = 18
    withdrawal_amount: float = 0.0

    @property
    def yearly_investment(self) -> float:
        return self.monthly_investment * 12

    @property
    def withdrawal_year(self) -> int:
        return self.withdrawal_age - self.girl_age


class YearlyRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    age: int
    monthly_investment: float
    investment: float  # yearly contribution applied this year
    interest: float
    withdrawal: float = 0.0
    total_investment: float  # cumulative contributions so far
    closing_balance: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    yearly_data: Tuple[YearlyRecord, ...]
    total_investment: float
    total_interest: float
    total_withdrawal: float
    maturity_value: float

    @property
    def has_withdrawal(self) -> bool:
        return self.total_withdrawal > 0
