"""
Profile endpoints: read, update and delete a user by email.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from account_api.app.core.store import RecordStore, get_store
from account_api.app.schemas.user import MessageResponse, UserDelete, UserRead, UserUpdate
from account_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/profile", response_model=UserRead, response_model_exclude_none=True)
async def get_profile(
    email: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
) -> UserRead:
    """Return the profile for ``email`` (404 if unknown)."""
    return await UserService.get_profile(store, email)


@router.delete("/profile", response_model=MessageResponse)
async def delete_profile(
    body: Optional[UserDelete] = Body(None),
    email: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
) -> MessageResponse:
    """Delete a user.

    The email is taken from the JSON body when present and from the
    ``email`` query parameter otherwise.
    """
    target = (body.email if body else None) or email
    await UserService.delete_profile(store, target)
    return MessageResponse(message="User deleted")


@router.patch("/profile", response_model=MessageResponse)
async def update_profile(
    updates: UserUpdate,
    store: RecordStore = Depends(get_store),
) -> MessageResponse:
    """Update profile fields of the user identified by ``email`` in the body.

    Only ``fullname``, ``phone``, ``address1``, ``address2``, ``city``,
    ``zipcode`` and ``country`` may be changed; other keys yield 400.
    """
    await UserService.update_profile(store, updates)
    return MessageResponse(message="Profile updated")
