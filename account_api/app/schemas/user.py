"""
Pydantic models for user data.

Request models deliberately declare every field as optional: missing
required values are reported by the service layer with the API's own
400 messages instead of FastAPI's generic 422 response.  ``UserRead``
is the only shape in which a stored record leaves the API and it has
no password field.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

# Optional contact details, in the order they are stored after the
# required ``email``, ``password`` and ``fullname``.
PROFILE_FIELDS = ("phone", "address1", "address2", "city", "zipcode", "country")

# Profile fields that may be changed after registration.  ``email`` is
# the record key and ``password`` is not editable through the profile.
UPDATABLE_FIELDS = ("fullname",) + PROFILE_FIELDS


class UserProfile(BaseModel):
    """Optional contact details shared by several schemas."""

    phone: Optional[str] = Field(None, examples=["+45 12 34 56 78"])
    address1: Optional[str] = Field(None, examples=["Vesterbrogade 1"])
    address2: Optional[str] = None
    city: Optional[str] = Field(None, examples=["Copenhagen"])
    zipcode: Optional[str] = Field(None, examples=["1620"])
    country: Optional[str] = Field(None, examples=["Denmark"])


class UserCreate(UserProfile):
    """Registration payload.  ``email``, ``password`` and ``fullname`` are required."""

    email: Optional[str] = Field(None, examples=["user@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])
    fullname: Optional[str] = Field(None, examples=["Jane Doe"])


class UserLogin(BaseModel):
    email: Optional[str] = Field(None, examples=["user@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class UserUpdate(UserProfile):
    """Profile update payload.

    ``email`` selects the record; all other fields are overwritten when
    present in the body.  Unknown keys are rejected.
    """

    email: Optional[str] = Field(None, examples=["user@example.com"])
    fullname: Optional[str] = None

    model_config = {"extra": "forbid"}


class UserDelete(BaseModel):
    email: Optional[str] = Field(None, examples=["user@example.com"])


class UserRead(BaseModel):
    """Schema for reading a user from the API.

    Stored records are not schema checked, so values are passed through
    whatever their type and keys not declared here are kept as well.
    """

    email: str
    fullname: Optional[Any] = None
    phone: Optional[Any] = None
    address1: Optional[Any] = None
    address2: Optional[Any] = None
    city: Optional[Any] = None
    zipcode: Optional[Any] = None
    country: Optional[Any] = None

    model_config = {"extra": "allow"}


class UserSummary(BaseModel):
    email: str
    fullname: str


class RegisterResponse(BaseModel):
    message: str
    user: UserSummary


class MessageResponse(BaseModel):
    message: str
