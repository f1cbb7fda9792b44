"""
Routes package for the reference company service.

This package contains one blueprint:
- api: REST endpoints for the ``/company`` resource
"""
