"""WSGI entry point for the reference company service."""

import os

from company_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
