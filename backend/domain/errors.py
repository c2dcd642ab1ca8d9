from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    INVALID_NUMBER = "InvalidNumber"
    INVESTMENT_OUT_OF_RANGE = "InvestmentOutOfRange"
    AGE_OUT_OF_RANGE = "AgeOutOfRange"
    WITHDRAWAL_AGE_OUT_OF_RANGE = "WithdrawalAgeOutOfRange"
    WITHDRAWAL_AMOUNT_NOT_POSITIVE = "WithdrawalAmountNotPositive"
    WITHDRAWAL_EXCEEDS_LIMIT = "WithdrawalExceedsLimit"


class FieldName(str, Enum):
    INVESTMENT = "investment"
    AGE = "age"
    WITHDRAWAL_AGE = "withdrawal_age"
    WITHDRAWAL_AMOUNT = "withdrawal_amount"


class FieldIssue(BaseModel):
    """
    One rejected input. `params` holds whatever the message needs
    (e.g. bound="min", limit=250); wording is left to the caller.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: FieldName
    kind: ErrorKind
    params: Dict[str, Union[int, float, str]] = Field(default_factory=dict)


class FieldErrors(BaseModel):
    """One message slot per form field; None means the field is fine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    investment: Optional[str] = None
    age: Optional[str] = None
    withdrawal_age: Optional[str] = None
    withdrawal_amount: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(
            slot is not None
            for slot in (self.investment, self.age, self.withdrawal_age, self.withdrawal_amount)
        )


class ProjectionValidationError(ValueError):
    def __init__(self, issues: Sequence[FieldIssue], messages: List[str]):
        super().__init__("; ".join(messages))
        self.issues = list(issues)
        self.messages = messages
