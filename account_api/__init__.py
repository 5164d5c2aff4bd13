"""
Top‑level package for the Account API.

This file makes ``account_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``account_api.app.main``.  Without this marker file, import resolution
for ``account_api`` would fail when running tests from the project
root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
