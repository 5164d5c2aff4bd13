"""
Cross‑cutting infrastructure: settings, logging, password hashing,
the error taxonomy and the JSON record store.
"""
