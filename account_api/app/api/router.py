"""
Top‑level API router.

This router aggregates the domain‑specific routers.  It is mounted by
the application under ``/api``; each endpoint module declares its own
paths (``/register``, ``/profile`` and so on) so no extra prefix is
added here.
"""

from fastapi import APIRouter

from .endpoints import auth, contact, profile

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(profile.router, tags=["profile"])
router.include_router(contact.router, tags=["contact"])
