"""
Test suite for the company API conformance project.

This package contains:
- unit/: payloads, client, checker and CLI in isolation
- integration/: reference service through the Flask test client
- contracts/: responses validated against contracts/openapi.yaml
- conformance/: the ordered black-box cases over real HTTP
"""
