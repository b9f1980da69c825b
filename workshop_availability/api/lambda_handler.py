"""
AWS Lambda handler for serverless deployment behind API Gateway.

Accepts both REST API events (``httpMethod`` / ``path``) and HTTP API
events (``requestContext.http``). Only ``POST .../availability`` is served.
"""

import json
from typing import Any, Optional, TypedDict

from workshop_availability.api.validation import validate_availability_request
from workshop_availability.availability.engine import compute_availability
from workshop_availability.catalog.loader import get_workshop_config
from workshop_availability.logging_context import (
    get_request_logger,
    new_request_id,
    reset_request_id,
    set_request_id,
)
from workshop_availability.utils import parse_iso_date

logger = get_request_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class LambdaResponse(TypedDict):
    statusCode: int
    headers: dict[str, str]
    body: str


def _respond(status_code: int, payload: dict) -> LambdaResponse:
    return {"statusCode": status_code, "headers": dict(JSON_HEADERS), "body": json.dumps(payload)}


def _route(event: dict) -> tuple[Optional[str], str]:
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method")
    path = event.get("path") or http.get("path") or ""
    return method, path


def handler(event: dict, context: Any) -> LambdaResponse:
    request_id = getattr(context, "aws_request_id", None) or new_request_id()
    token = set_request_id(request_id)
    try:
        return _handle(event)
    finally:
        reset_request_id(token)


def _handle(event: dict) -> LambdaResponse:
    method, path = _route(event)
    if method != "POST" or not path.endswith("/availability"):
        return _respond(404, {"success": False, "error": "Not found"})

    try:
        body = json.loads(event["body"]) if event.get("body") else {}
    except json.JSONDecodeError:
        return _respond(400, {"success": False, "error": "Invalid JSON body"})

    validation = validate_availability_request(body)
    if not validation.valid or validation.data is None:
        return _respond(400, {
            "success": False,
            "error": "Validation failed",
            "details": [e.model_dump() for e in validation.errors],
        })

    query = validation.data
    try:
        config = get_workshop_config()
        period_start = parse_iso_date(query.start_date) if query.start_date else None
        response = compute_availability(config, query, period_start)
    except Exception as e:
        logger.exception("Availability computation failed")
        return _respond(500, {
            "success": False,
            "error": "Internal server error",
            "message": str(e),
        })

    return _respond(200, response.to_json_dict())
