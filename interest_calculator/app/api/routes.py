"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from interest_calculator.core.calculation import run_calculation
from interest_calculator.core.ping import get_ping_response
from interest_calculator.domain.export import breakdown_to_csv
from interest_calculator.domain.query_state import QueryStateError, decode_query
from interest_calculator.schemas.calculation import CalculationRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _json_response(model: BaseModel) -> Response:
    """Serialize with pydantic; non-finite floats are written as null."""
    return Response(model.model_dump_json(), mimetype="application/json")


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected calculator input: %d error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.errorhandler(QueryStateError)
def _handle_query_state_error(exc: QueryStateError):
    logger.info("rejected share link: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_response().model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Full calculator result for a submitted form."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    return _json_response(run_calculation(payload))


@api_bp.get("/calc/projection")
def projection_from_link() -> Any:
    """Same as the POST route, with the form restored from a share link's query string."""
    payload = decode_query(request.args.to_dict())
    return _json_response(run_calculation(payload))


@api_bp.post("/calc/projection/csv")
def projection_csv() -> Response:
    """Yearly breakdown as a CSV download."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    calculation = run_calculation(payload)
    return Response(
        breakdown_to_csv(calculation.breakdown, calculation.result),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=projection.csv"},
    )
