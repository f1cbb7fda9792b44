"""
Shared pytest fixtures for the company conformance test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories backed by Faker
- Database setup/teardown
- Test client creation
"""

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from company_app import create_app, db
from company_app.models import Company
from conformance.payloads import valid_company_payload


# Brazilian locale so generated states, cities and addresses look real
fake = Faker("pt_BR")


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create the reference company service for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests without a real server.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Creates all tables before the test, rolls back and drops them after,
    so every test starts from an empty ``companies`` table.

    Yields:
        SQLAlchemy database handle.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

def fake_company_data(**overrides: Any) -> dict[str, Any]:
    """Return a random but valid company payload."""
    data = {
        "name": fake.company(),
        "cnpj": fake.numerify("##############"),
        "state": fake.estado_sigla(),
        "city": fake.city()[:100],
        "address": fake.street_address()[:200],
        "sector": fake.job()[:100],
    }
    data.update(overrides)
    return data


@pytest.fixture
def company_factory(db_session):
    """
    Factory fixture for creating stored Company instances.

    Example:
        def test_something(company_factory):
            company = company_factory(name="ACME")
            assert company.id is not None
    """
    created = []

    def _create_company(**overrides: Any) -> Company:
        company = Company()
        company.apply(fake_company_data(**overrides))
        db_session.session.add(company)
        db_session.session.commit()
        created.append(company)
        return company

    yield _create_company

    for company in created:
        existing = db_session.session.get(Company, company.id)
        if existing:
            db_session.session.delete(existing)
    db_session.session.commit()


@pytest.fixture
def sample_company(company_factory) -> Company:
    """Create a single stored company."""
    return company_factory(name="Empresa Amostra")


@pytest.fixture
def multiple_companies(company_factory) -> list[Company]:
    """Create three stored companies."""
    return [company_factory() for _ in range(3)]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_company_data() -> dict[str, Any]:
    """
    Provide the canonical valid company payload for POST/PUT requests.

    Returns:
        Dictionary with valid company field values.
    """
    return valid_company_payload()


@pytest.fixture
def random_company_data() -> dict[str, Any]:
    """Provide a Faker-generated valid company payload."""
    return fake_company_data()


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
