"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services work
against the record store interface from ``core.store`` rather than a
concrete file, so API handlers stay unaware of how users are persisted.
"""
