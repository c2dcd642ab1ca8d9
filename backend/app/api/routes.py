"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.calculator import project_or_raise
from backend.core.config import DEFAULT_INPUTS, SchemeConfig
from backend.core.formatting import TAX_NOTE, chart_series, field_errors, summary_lines, table_rows
from backend.core.log import get_logger
from backend.core.ping import get_ping_message
from backend.core.validation import validate_fields
from backend.domain.errors import ProjectionValidationError
from backend.schemas.ping import PingResponse
from backend.schemas.projection import (
    FieldErrorsResponse,
    IssueResponse,
    ProjectionResponse,
    RawInputs,
    RejectedResponse,
    SchemeResponse,
    ValidateResponse,
    YearlyRecordResponse,
)

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


def _scheme() -> SchemeConfig:
    return current_app.config["SCHEME"]


def _read_inputs() -> RawInputs:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return RawInputs.model_validate(raw_payload)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("malformed payload error_count=%d", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ProjectionValidationError)
def _handle_projection_rejected(exc: ProjectionValidationError):
    """Input the user has to correct; reported per field."""
    errors = field_errors(exc.issues)
    response = RejectedResponse(
        errors=FieldErrorsResponse.model_validate(errors.model_dump()),
        issues=[
            IssueResponse(field=issue.field.value, kind=issue.kind.value, params=issue.params)
            for issue in exc.issues
        ],
    )
    return jsonify(response.model_dump(by_alias=True)), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint; also reports the rate the projections use."""
    response = PingResponse(message=get_ping_message(), interest_rate=_scheme().interest_rate)
    return jsonify(response.model_dump())


@api_bp.get("/ssy/scheme")
def scheme() -> Any:
    """Scheme rules and default form values for the calculator UI."""
    cfg = _scheme()
    response = SchemeResponse(
        deposit_period_years=cfg.deposit_period_years,
        maturity_period_years=cfg.maturity_period_years,
        interest_rate=cfg.interest_rate,
        min_investment=cfg.min_investment,
        max_investment=cfg.max_investment,
        monthly_max=cfg.monthly_max,
        min_girl_age=cfg.min_girl_age,
        max_girl_age=cfg.max_girl_age,
        min_withdrawal_age=cfg.min_withdrawal_age,
        max_withdrawal_age=cfg.maturity_period_years - 1,
        withdrawal_limit_fraction=cfg.withdrawal_limit_fraction,
        defaults=DEFAULT_INPUTS,
        tax_note=TAX_NOTE,
    )
    return jsonify(response.model_dump(by_alias=True))


@api_bp.post("/ssy/validate")
def validate() -> Any:
    """Field-level feedback while the form is being edited."""
    errors = field_errors(validate_fields(_read_inputs(), _scheme()))
    response = ValidateResponse(
        errors=FieldErrorsResponse.model_validate(errors.model_dump()),
        has_errors=errors.has_errors,
    )
    return jsonify(response.model_dump(by_alias=True))


@api_bp.post("/ssy/projection")
def projection() -> Any:
    """Year-by-year SSY projection plus the rendered summary and table."""
    result = project_or_raise(_read_inputs(), _scheme())
    response = ProjectionResponse(
        yearly_data=[YearlyRecordResponse.model_validate(r.model_dump()) for r in result.yearly_data],
        total_investment=result.total_investment,
        total_interest=result.total_interest,
        total_withdrawal=result.total_withdrawal,
        maturity_value=result.maturity_value,
        summary=summary_lines(result),
        table=table_rows(result),
        chart=chart_series(result),
    )
    return jsonify(response.model_dump(by_alias=True))
