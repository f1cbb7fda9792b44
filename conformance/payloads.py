"""Company payloads used by the conformance cases."""

from __future__ import annotations

import copy
import re
from typing import Any

VALID_COMPANY: dict[str, str] = {
    "name": "Empresa Teste",
    "cnpj": "12345678000195",
    "state": "SC",
    "city": "Criciuma",
    "address": "Rua Teste, 123",
    "sector": "Tecnologia",
}

UPDATED_COMPANY_NAME = "Empresa Teste Atualizada"
MALFORMED_CNPJ = "123"

# Text fields the service must reject when blank.
REQUIRED_TEXT_FIELDS = ("name", "state", "city", "address")

_CNPJ_PATTERN = re.compile(r"[0-9]{14}")


def valid_company_payload() -> dict[str, Any]:
    """Return a fresh copy of the valid company payload."""
    return copy.deepcopy(VALID_COMPANY)


def with_field(payload: dict[str, Any], field: str, value: Any) -> dict[str, Any]:
    """Return a copy of ``payload`` with ``field`` set to ``value``."""
    variant = copy.deepcopy(payload)
    variant[field] = value
    return variant


def updated_company_payload(base: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the valid payload with its name changed."""
    return with_field(base or VALID_COMPANY, "name", UPDATED_COMPANY_NAME)


def invalid_company_payload(base: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the valid payload with a blank name."""
    return with_field(base or VALID_COMPANY, "name", "")


def is_valid_cnpj_format(value: Any) -> bool:
    """True when ``value`` is a string of exactly 14 ASCII digits."""
    return isinstance(value, str) and bool(_CNPJ_PATTERN.fullmatch(value))
