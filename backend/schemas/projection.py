"""Data contracts for the SSY calculator endpoints."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class RawInputs(_CamelModel):
    """Form values exactly as typed; numbers are parsed during validation."""

    monthly_investment: Any = Field(None, description="Monthly contribution; yearly total is bounded.")
    girl_age: Any = Field(None, description="Age of the girl when the account is opened.")
    is_withdrawal_enabled: bool = False
    withdrawal_age: Any = 18
    withdrawal_amount: Any = 0


class FieldErrorsResponse(_CamelModel):
    investment: Optional[str] = None
    age: Optional[str] = None
    withdrawal_age: Optional[str] = None
    withdrawal_amount: Optional[str] = None


class ValidateResponse(_CamelModel):
    errors: FieldErrorsResponse
    has_errors: bool


class IssueResponse(_CamelModel):
    field: str
    kind: str
    params: Dict[str, Union[int, float, str]] = Field(default_factory=dict)


class RejectedResponse(_CamelModel):
    errors: FieldErrorsResponse
    issues: List[IssueResponse]


class YearlyRecordResponse(_CamelModel):
    year: int
    age: int
    monthly_investment: float
    investment: float
    interest: float
    withdrawal: float
    total_investment: float
    closing_balance: float


class ProjectionResponse(_CamelModel):
    yearly_data: List[YearlyRecordResponse]
    total_investment: float
    total_interest: float
    total_withdrawal: float
    maturity_value: float
    summary: List[str]
    table: List[List[str]]
    chart: List[Dict[str, Union[int, float]]]


class SchemeResponse(_CamelModel):
    deposit_period_years: int
    maturity_period_years: int
    interest_rate: float
    min_investment: float
    max_investment: float
    monthly_max: float
    min_girl_age: int
    max_girl_age: int
    min_withdrawal_age: int
    max_withdrawal_age: int
    withdrawal_limit_fraction: float
    defaults: Dict[str, Any]
    tax_note: str
