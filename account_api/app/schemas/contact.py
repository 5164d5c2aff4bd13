"""
Pydantic schemas for the contact form.

The form is relayed as‑is to the operator mailbox; none of the fields
are required.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ContactMessage(BaseModel):
    """Contact form submission."""

    name: Optional[str] = Field(None, examples=["Jane Doe"])
    email: Optional[str] = Field(None, description="Address replies should go to")
    message: Optional[str] = Field(None, description="Free‑form message text")


class ContactError(BaseModel):
    error: str
