"""
REST API endpoints for Company management.

This module provides CRUD operations for companies via HTTP methods.
All endpoints return JSON responses (DELETE returns an empty 204) and
follow the status-code contract the conformance suite checks.

Endpoints:
    GET    /health          - Health check
    GET    /company         - List all companies
    GET    /company/<id>    - Get a single company by ID
    POST   /company         - Create a new company
    PUT    /company/<id>    - Replace an existing company
    DELETE /company/<id>    - Delete a company
"""

import logging
from typing import Any

from flask import Blueprint, Response, jsonify, request
from sqlalchemy import select

from company_app import db
from company_app.models import Company
from conformance.payloads import is_valid_cnpj_format

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

REQUIRED_FIELDS = ("name", "cnpj", "state", "city", "address")

MAX_LENGTHS = {
    "name": 200,
    "state": 2,
    "city": 100,
    "address": 200,
    "sector": 100,
}

# Largest value an SQLite INTEGER primary key can hold.
MAX_COMPANY_ID = 2**63 - 1


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def validate_company_data(data: dict[str, Any]) -> tuple[bool, str | None]:
    """
    Validate a full company payload from a request.

    Args:
        data: Dictionary containing company data.

    Returns:
        Tuple of (is_valid, error_message).
    """
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            return False, f"'{field}' is required"

    sector = data.get("sector")
    if sector is not None and not isinstance(sector, str):
        return False, "'sector' must be a string"

    if not is_valid_cnpj_format(data["cnpj"]):
        return False, "Invalid cnpj. Must be exactly 14 digits"

    for field, max_length in MAX_LENGTHS.items():
        value = data.get(field)
        if value and len(value) > max_length:
            return False, f"'{field}' must be {max_length} characters or less"

    return True, None


def parse_company_id(raw_id: str) -> int | None:
    """Return the integer id encoded in a path segment, or None if malformed."""
    if not (raw_id.isascii() and raw_id.isdigit()):
        return None
    return int(raw_id)


def _read_payload() -> tuple[dict[str, Any] | None, str | None]:
    """Return the JSON object body of the current request or an error message."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None, "Request body must be a JSON object"
    return data, None


def _load_company(raw_id: str) -> tuple[Company | None, tuple[Response, int] | None]:
    """
    Resolve a path id to a stored company.

    Returns:
        Tuple of (company, error_response). Exactly one is not None.
    """
    company_id = parse_company_id(raw_id)
    if company_id is None:
        logger.warning("Malformed company id: %r", raw_id)
        return None, (jsonify({"error": "Invalid company id"}), 400)

    company = None
    if company_id <= MAX_COMPANY_ID:
        company = db.session.get(Company, company_id)
    if company is None:
        logger.warning("Company %s not found", company_id)
        return None, (jsonify({"error": "Company not found"}), 404)

    return company, None


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for readiness probes."""
    return jsonify({"status": "healthy", "service": "company"}), 200


@api_bp.route("/company", methods=["GET"])
def list_companies() -> tuple[Response, int]:
    """
    List all companies ordered by id.

    Returns:
        JSON array of companies and 200 status code.
    """
    logger.info("GET /company - Fetching all companies")

    companies = db.session.scalars(select(Company).order_by(Company.id.asc())).all()
    logger.info("Found %d companies", len(companies))

    return jsonify([company.to_dict() for company in companies]), 200


@api_bp.route("/company/<company_id>", methods=["GET"])
def get_company(company_id: str) -> tuple[Response, int]:
    """
    Get a single company by ID.

    Returns:
        JSON company and 200, 400 for a malformed id, or 404 if missing.
    """
    logger.info("GET /company/%s - Fetching company", company_id)

    company, error = _load_company(company_id)
    if error:
        return error

    return jsonify(company.to_dict()), 200


@api_bp.route("/company", methods=["POST"])
def create_company() -> tuple[Response, int]:
    """
    Create a new company.

    Request Body (JSON):
        name, cnpj, state, city, address: required non-blank strings
        sector: optional string

    Returns:
        JSON company with 201, or an error message and 400.
    """
    logger.info("POST /company - Creating new company")

    data, error = _read_payload()
    if error:
        return jsonify({"error": error}), 400

    is_valid, error = validate_company_data(data)
    if not is_valid:
        logger.warning("Validation failed: %s", error)
        return jsonify({"error": error}), 400

    company = Company()
    company.apply(data)
    db.session.add(company)
    db.session.commit()

    logger.info("Created company with ID: %s", company.id)
    return jsonify(company.to_dict()), 201


@api_bp.route("/company/<company_id>", methods=["PUT"])
def update_company(company_id: str) -> tuple[Response, int]:
    """
    Replace an existing company.

    The id is resolved before the body is validated, so an unknown id
    answers 404 regardless of the payload.

    Returns:
        JSON company with 200, 400 for a malformed id or invalid body,
        or 404 if missing.
    """
    logger.info("PUT /company/%s - Updating company", company_id)

    company, error_response = _load_company(company_id)
    if error_response:
        return error_response

    data, error = _read_payload()
    if error:
        return jsonify({"error": error}), 400

    is_valid, error = validate_company_data(data)
    if not is_valid:
        logger.warning("Validation failed: %s", error)
        return jsonify({"error": error}), 400

    company.apply(data)
    db.session.commit()

    logger.info("Updated company %s", company.id)
    return jsonify(company.to_dict()), 200


@api_bp.route("/company/<company_id>", methods=["DELETE"])
def delete_company(company_id: str) -> tuple[Response, int] | tuple[str, int]:
    """
    Delete a company.

    Returns:
        Empty 204, 400 for a malformed id, or 404 if missing.
    """
    logger.info("DELETE /company/%s - Deleting company", company_id)

    company, error = _load_company(company_id)
    if error:
        return error

    db.session.delete(company)
    db.session.commit()

    logger.info("Deleted company %s", company_id)
    return "", 204


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.app_errorhandler(400)
def bad_request(error: Exception) -> tuple[Response, int]:
    """Handle 400 Bad Request errors."""
    return jsonify({"error": "Bad request"}), 400


@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"error": "Method not allowed"}), 405


@api_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
