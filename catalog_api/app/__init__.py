"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  ``core`` holds configuration, logging, the response
envelope, error handling and the in-memory store; ``schemas`` the
record models; ``services`` the business logic; and ``api`` the
routers, one module per domain under ``api/endpoints``.
"""

from .main import app  # noqa: F401
