"""
API package containing the HTTP routes.

The top‑level ``router`` in ``router.py`` includes every
domain‑specific router from ``endpoints`` and is mounted by the
application under ``/api``.
"""
