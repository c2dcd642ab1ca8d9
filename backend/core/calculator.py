"""Entry points that validate form inputs and run the projection on request."""

from __future__ import annotations

from typing import List, Union

from backend.core.config import DEFAULT_SCHEME, SchemeConfig
from backend.core.formatting import field_errors, render_message
from backend.core.log import get_logger
from backend.core.projection import simulate
from backend.core.validation import validate_inputs
from backend.domain.errors import FieldErrors, FieldIssue, ProjectionValidationError
from backend.models import ProjectionInputs, ProjectionResult
from backend.schemas.projection import RawInputs

logger = get_logger(__name__)


def _run(
    raw: Union[RawInputs, dict], scheme: SchemeConfig
) -> Union[ProjectionResult, List[FieldIssue]]:
    outcome = validate_inputs(raw, scheme)
    if not isinstance(outcome, ProjectionInputs):
        logger.info("projection rejected kinds=%s", ",".join(issue.kind.value for issue in outcome))
        return outcome

    result = simulate(outcome, scheme)
    logger.info(
        "projection computed girl_age=%s yearly=%.2f withdrawal=%.2f maturity_value=%.2f",
        outcome.girl_age,
        outcome.yearly_investment,
        result.total_withdrawal,
        result.maturity_value,
    )
    return result


def compute(
    raw: Union[RawInputs, dict], scheme: SchemeConfig = DEFAULT_SCHEME
) -> Union[ProjectionResult, FieldErrors]:
    """
    Validate and, only if everything passes, simulate.

    On invalid input nothing is simulated and the caller gets the per-field
    messages back; any result it already shows should be left as it is.
    """
    outcome = _run(raw, scheme)
    if isinstance(outcome, ProjectionResult):
        return outcome
    return field_errors(outcome)


def project_or_raise(
    raw: Union[RawInputs, dict], scheme: SchemeConfig = DEFAULT_SCHEME
) -> ProjectionResult:
    outcome = _run(raw, scheme)
    if isinstance(outcome, ProjectionResult):
        return outcome
    raise ProjectionValidationError(outcome, [render_message(issue) for issue in outcome])
