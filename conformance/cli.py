"""
Run the company conformance cases from the command line.

Prints one line per case and an overall verdict. Exit codes follow a
three-state convention so that CI can distinguish "service does not
conform" from "script crashed":

- ``0``: every case passed
- ``1``: at least one case failed
- ``2``: the script itself failed (bad arguments, unexpected error)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from config import ConformanceConfig
from conformance.checker import CaseResult, ConformanceChecker
from conformance.client import CompanyApiClient

EXIT_PASS = 0
EXIT_CASE_FAILURE = 1
EXIT_SCRIPT_ERROR = 2

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the conformance runner."""
    parser = argparse.ArgumentParser(
        description="Check a company CRUD service against the expected HTTP contract."
    )
    parser.add_argument(
        "--base-url",
        default=ConformanceConfig.API_BASE_URL,
        help="Service root; companies live at <base-url>/company",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=ConformanceConfig.REQUEST_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request",
    )
    return parser.parse_args(argv)


def _print_summary(base_url: str, results: list[CaseResult]) -> None:
    """Print a human-readable results table to stdout for CI logs."""
    print(f"Company API Conformance: {base_url}")
    print("-" * 78)
    print(f"{'#':>3}  {'Case':<62}{'Status':>6}{'Result':>7}")
    print("-" * 78)
    for result in results:
        status = "" if result.status_code is None else str(result.status_code)
        verdict = "PASS" if result.passed else "FAIL"
        print(f"{result.number:>3}  {result.title[:62]:<62}{status:>6}{verdict:>7}")
        if not result.passed:
            print(f"     {result.detail}")
    print("-" * 78)
    passed = sum(1 for result in results if result.passed)
    print(f"Passed {passed}/{len(results)}")
    print(f"Overall: {'PASS' if passed == len(results) else 'FAIL'}")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point: run every case against the configured service.

    Returns:
        ``EXIT_PASS`` (0) if every case passed,
        ``EXIT_CASE_FAILURE`` (1) if any failed, or
        ``EXIT_SCRIPT_ERROR`` (2) on unexpected failures.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        with CompanyApiClient(args.base_url, timeout=args.timeout) as client:
            results = ConformanceChecker(client).run()
    except Exception as exc:  # pragma: no cover - CLI guard
        logger.exception("Conformance run crashed")
        print(f"Conformance run failed: {exc}", file=sys.stderr)
        return EXIT_SCRIPT_ERROR

    _print_summary(args.base_url, results)
    return EXIT_PASS if all(result.passed for result in results) else EXIT_CASE_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
