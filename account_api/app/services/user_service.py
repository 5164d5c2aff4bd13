"""
Business logic for user accounts.

``UserService`` implements registration, login and the profile
operations on top of a ``RecordStore``.  Users are looked up by a
linear scan over the collection keyed on email.  Mutations run inside
``store.transaction()`` so the load, change and save of one request
cannot interleave with another request's.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool

from ..core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from ..core.security import hash_password, verify_password
from ..core.store import Record, RecordStore
from ..schemas.user import PROFILE_FIELDS, UPDATABLE_FIELDS, UserCreate, UserRead, UserSummary, UserUpdate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
USER_NOT_FOUND = "User not found"
EMAIL_REQUIRED = "Email is required"


def _find_index(records: List[Record], email: Optional[str]) -> int:
    """Return the index of the first record with ``email``, or -1."""
    for index, record in enumerate(records):
        if record.get("email") == email:
            return index
    return -1


def _public(record: Record) -> UserRead:
    """Strip the password hash from a stored record."""
    data: Dict[str, Any] = {key: value for key, value in record.items() if key != "password"}
    return UserRead(**data)


class UserService:
    """Service for user accounts.

    Every method receives the store explicitly; the API layer obtains it
    from the ``get_store`` dependency.
    """

    @classmethod
    async def register(cls, store: RecordStore, data: UserCreate) -> UserSummary:
        """Create a new user record.

        Raises ``ValidationError`` when email, password or fullname is
        missing or empty and ``ConflictError`` when the email is taken.
        The password is stored hashed and never echoed back.
        """
        if not data.email or not data.password or not data.fullname:
            raise ValidationError("Missing required fields")

        # Hash before taking the store lock; nothing inside a transaction awaits.
        record: Record = {
            "email": data.email,
            "password": await run_in_threadpool(hash_password, data.password),
            "fullname": data.fullname,
        }
        for key in PROFILE_FIELDS:
            value = getattr(data, key)
            if value is not None:
                record[key] = value
        with store.transaction() as records:
            if _find_index(records, data.email) != -1:
                raise ConflictError("User already exists")
            records.append(record)
        logger.info("Registered user %s", data.email)
        return UserSummary(email=data.email, fullname=data.fullname)

    @classmethod
    async def authenticate(cls, store: RecordStore, email: Optional[str], password: Optional[str]) -> UserRead:
        """Check credentials and return the user's record without its password.

        Unknown email and wrong password raise the same ``AuthError``.
        """
        records = store.load()
        index = _find_index(records, email) if email else -1
        if index == -1 or not await run_in_threadpool(
            verify_password, password, records[index].get("password")
        ):
            logger.warning("Failed login attempt for %s", email)
            raise AuthError(INVALID_CREDENTIALS)
        return _public(records[index])

    @classmethod
    async def get_profile(cls, store: RecordStore, email: Optional[str]) -> UserRead:
        records = store.load()
        index = _find_index(records, email) if email else -1
        if index == -1:
            raise NotFoundError(USER_NOT_FOUND)
        return _public(records[index])

    @classmethod
    async def delete_profile(cls, store: RecordStore, email: Optional[str]) -> None:
        """Remove the first record matching ``email``."""
        if not email:
            raise ValidationError(EMAIL_REQUIRED)
        with store.transaction() as records:
            index = _find_index(records, email)
            if index == -1:
                raise NotFoundError(USER_NOT_FOUND)
            del records[index]
        logger.info("Deleted user %s", email)

    @classmethod
    async def update_profile(cls, store: RecordStore, data: UserUpdate) -> None:
        """Overwrite the profile fields present in ``data``.

        Only fields explicitly sent by the client are applied, so an
        omitted field keeps its stored value while an explicit ``null``
        clears it.  ``email`` itself is never changed.
        """
        if not data.email:
            raise ValidationError(EMAIL_REQUIRED)
        updates = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if key in UPDATABLE_FIELDS
        }
        with store.transaction() as records:
            index = _find_index(records, data.email)
            if index == -1:
                raise NotFoundError(USER_NOT_FOUND)
            records[index].update(updates)
        logger.info("Updated profile of %s (%s)", data.email, ", ".join(sorted(updates)) or "no changes")
