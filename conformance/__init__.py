"""
Black-box conformance checks for a company CRUD service.

- client: ``requests``-based client for the ``/company`` endpoints
- payloads: valid and deliberately invalid company payloads
- checker: the ordered request/assertion cases
- cli: command-line runner
"""

from conformance.checker import CaseResult, ConformanceChecker
from conformance.client import CompanyApiClient

__all__ = ["CaseResult", "CompanyApiClient", "ConformanceChecker"]
