"""
Fixtures for the company API conformance suite.

The suite talks HTTP to a real server. ``COMPANY_API_URL`` selects a
remote service (for example the public deployment); when it is unset the
reference company service is served from a background thread so the
suite runs offline.

Key SDET Concepts Demonstrated:
- Session-scoped URL fixtures shared across the whole suite
- Swapping the system under test through the environment
- Black-box HTTP testing with plain ``requests``
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from company_app import db
from conformance.client import CompanyApiClient
from shared.live_stack import live_service_url


@pytest.fixture(scope="session")
def company_api_url(app) -> Generator[str, None, None]:
    """Yield the root URL of a ready company service."""

    def _reference_app():
        # Start from an empty table so list assertions are not confused by
        # rows left behind by an interrupted run.
        with app.app_context():
            db.drop_all()
            db.create_all()
        return app

    yield from live_service_url(base_url_env="COMPANY_API_URL", app_factory=_reference_app)


@pytest.fixture(scope="module")
def company_api(company_api_url) -> Generator[CompanyApiClient, None, None]:
    """Client bound to the service under test, shared by one module."""
    with CompanyApiClient(company_api_url) as api_client:
        yield api_client
