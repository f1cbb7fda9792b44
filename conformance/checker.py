"""
Ordered conformance cases for a company CRUD service.

The checker drives fifteen request/assertion pairs against one service
in a fixed order. The id returned by the first case is captured and
reused by the dependent cases (list, get, update, delete, get after
delete), so a failed create makes those cases fail as well.

Every case is pass/fail on its own: an assertion failure or a transport
error is recorded on that case's result and the run moves on to the
next case. Nothing is retried and nothing is cleaned up.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import requests

from config import ConformanceConfig
from conformance.client import CompanyApiClient
from conformance.payloads import (
    MALFORMED_CNPJ,
    REQUIRED_TEXT_FIELDS,
    invalid_company_payload,
    updated_company_payload,
    valid_company_payload,
    with_field,
)

logger = logging.getLogger(__name__)


class CaseFailure(AssertionError):
    """A conformance expectation that the service did not meet."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class CaseResult:
    """Outcome of one executed case."""

    number: int
    title: str
    passed: bool
    status_code: int | None = None
    detail: str = ""


@dataclass(frozen=True)
class ConformanceCase:
    """One numbered request/assertion pair."""

    number: int
    title: str
    run: Callable[[], requests.Response]


# -----------------------------------------------------------------------------
# Assertion Helpers
# -----------------------------------------------------------------------------

def expect_status(response: requests.Response, expected: int) -> None:
    """Raise CaseFailure unless ``response`` carries the ``expected`` status."""
    if response.status_code != expected:
        raise CaseFailure(
            f"expected HTTP {expected}, got {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )


def response_json(response: requests.Response) -> Any:
    """Decode a JSON body, failing the case when it is not JSON."""
    try:
        return response.json()
    except ValueError as exc:
        raise CaseFailure(
            f"response body is not JSON: {response.text[:200]!r}",
            status_code=response.status_code,
        ) from exc


def is_json_like(actual: Any, expected: dict[str, Any]) -> bool:
    """True when ``actual`` is an object holding every expected key/value."""
    if not isinstance(actual, dict):
        return False
    return all(key in actual and actual[key] == value for key, value in expected.items())


def expect_json_like(response: requests.Response, expected: dict[str, Any]) -> Any:
    """Assert the JSON body contains ``expected``; return the decoded body."""
    body = response_json(response)
    if not is_json_like(body, expected):
        raise CaseFailure(
            f"expected body like {expected}, got {body}",
            status_code=response.status_code,
        )
    return body


def contains_matching(items: Any, expected: dict[str, Any]) -> bool:
    """True when ``items`` is a list with at least one element like ``expected``."""
    if not isinstance(items, list):
        return False
    return any(is_json_like(item, expected) for item in items)


# -----------------------------------------------------------------------------
# Checker
# -----------------------------------------------------------------------------

class ConformanceChecker:
    """
    Run the company conformance cases against one service.

    Args:
        client: Client bound to the service under test.
        payload: Valid company payload used for create; defaults to
            :func:`conformance.payloads.valid_company_payload`.
        nonexistent_id: Id assumed never to exist on the service.
        invalid_id: Non-numeric id token the service must reject.
    """

    def __init__(
        self,
        client: CompanyApiClient,
        payload: dict[str, Any] | None = None,
        nonexistent_id: int | str = ConformanceConfig.NONEXISTENT_COMPANY_ID,
        invalid_id: str = ConformanceConfig.INVALID_COMPANY_ID,
    ):
        self.client = client
        self.payload = payload or valid_company_payload()
        self.nonexistent_id = nonexistent_id
        self.invalid_id = invalid_id
        self.captured_id: Any = None

    def cases(self) -> list[ConformanceCase]:
        """Return the cases in execution order."""
        cases = [
            ConformanceCase(1, "POST /company - Successful creation", self.create_valid),
            ConformanceCase(2, "POST /company - Error with invalid CNPJ", self.create_with_malformed_cnpj),
            ConformanceCase(3, "GET /company - List of companies", self.list_contains_created),
            ConformanceCase(4, "GET /company/:id - Get existing company", self.get_created),
            ConformanceCase(5, "GET /company/:id - Error for non-existing company", self.get_nonexistent),
            ConformanceCase(6, "PUT /company - Update existing company", self.update_created),
            ConformanceCase(7, "PUT /company - Error for updating non-existing company", self.update_nonexistent),
            ConformanceCase(8, "PUT /company - Validation error when updating with invalid data", self.update_with_invalid_data),
            ConformanceCase(9, "DELETE /company - Successful deletion", self.delete_created),
            ConformanceCase(10, "GET /company/:id - Error for deleted company", self.get_deleted),
        ]
        for number, field in enumerate(REQUIRED_TEXT_FIELDS, start=11):
            cases.append(
                ConformanceCase(
                    number,
                    f"POST /company - Error with empty {field}",
                    self._blank_field_case(field),
                )
            )
        cases.append(
            ConformanceCase(15, "PUT /company - Error with invalid ID", self.update_with_malformed_id)
        )
        return cases

    def run(self) -> list[CaseResult]:
        """Execute every case in order and return one result per case."""
        results = [self.run_case(case) for case in self.cases()]
        failed = sum(1 for result in results if not result.passed)
        logger.info("Conformance run finished: %d passed, %d failed", len(results) - failed, failed)
        return results

    def run_case(self, case: ConformanceCase) -> CaseResult:
        """Execute one case, converting any failure into a failed result."""
        logger.debug("Case %d: %s", case.number, case.title)
        try:
            response = case.run()
        except CaseFailure as exc:
            logger.warning("Case %d failed: %s", case.number, exc)
            return CaseResult(case.number, case.title, False, exc.status_code, str(exc))
        except requests.RequestException as exc:
            logger.warning("Case %d failed on transport: %s", case.number, exc)
            return CaseResult(case.number, case.title, False, None, f"request failed: {exc}")

        logger.info("Case %d passed: %s", case.number, case.title)
        return CaseResult(case.number, case.title, True, response.status_code)

    def _require_id(self) -> Any:
        if self.captured_id is None:
            raise CaseFailure("no company id captured")
        return self.captured_id

    # Cases -------------------------------------------------------------------

    def create_valid(self) -> requests.Response:
        response = self.client.create(self.payload)
        expect_status(response, 201)
        body = response_json(response)
        if not isinstance(body, dict) or body.get("id") is None:
            raise CaseFailure(f"created company has no id: {body}", status_code=201)
        self.captured_id = body["id"]
        logger.info("Captured company id %s", self.captured_id)
        if body.get("name") != self.payload["name"]:
            raise CaseFailure(
                f"expected name {self.payload['name']!r}, got {body.get('name')!r}",
                status_code=201,
            )
        return response

    def create_with_malformed_cnpj(self) -> requests.Response:
        response = self.client.create(with_field(self.payload, "cnpj", MALFORMED_CNPJ))
        expect_status(response, 400)
        return response

    def list_contains_created(self) -> requests.Response:
        company_id = self._require_id()
        response = self.client.list()
        expect_status(response, 200)
        expected = {"id": company_id, **self.payload}
        if not contains_matching(response_json(response), expected):
            raise CaseFailure(f"no listed company matches {expected}", status_code=200)
        return response

    def get_created(self) -> requests.Response:
        company_id = self._require_id()
        response = self.client.get(company_id)
        expect_status(response, 200)
        expect_json_like(response, {"id": company_id, "name": self.payload["name"]})
        return response

    def get_nonexistent(self) -> requests.Response:
        response = self.client.get(self.nonexistent_id)
        expect_status(response, 404)
        return response

    def update_created(self) -> requests.Response:
        company_id = self._require_id()
        updated = updated_company_payload(self.payload)
        response = self.client.update(company_id, updated)
        expect_status(response, 200)
        expect_json_like(response, {"id": company_id, "name": updated["name"]})
        return response

    def update_nonexistent(self) -> requests.Response:
        response = self.client.update(self.nonexistent_id, self.payload)
        expect_status(response, 404)
        return response

    def update_with_invalid_data(self) -> requests.Response:
        company_id = self._require_id()
        response = self.client.update(company_id, invalid_company_payload(self.payload))
        expect_status(response, 400)
        return response

    def delete_created(self) -> requests.Response:
        company_id = self._require_id()
        response = self.client.delete(company_id)
        expect_status(response, 204)
        if response.content:
            raise CaseFailure(f"expected no body, got {response.text[:200]!r}", status_code=204)
        return response

    def get_deleted(self) -> requests.Response:
        company_id = self._require_id()
        response = self.client.get(company_id)
        expect_status(response, 404)
        return response

    def _blank_field_case(self, field: str) -> Callable[[], requests.Response]:
        def create_with_blank_field() -> requests.Response:
            response = self.client.create(with_field(self.payload, field, ""))
            expect_status(response, 400)
            return response

        return create_with_blank_field

    def update_with_malformed_id(self) -> requests.Response:
        response = self.client.update(self.invalid_id, self.payload)
        expect_status(response, 400)
        return response
