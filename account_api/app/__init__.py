"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Configuration, logging, password hashing and the record
store live in ``core``; request and response payloads in ``schemas``;
business logic in ``services``; and HTTP routes in ``api/endpoints``.
"""

from .main import app  # noqa: F401
