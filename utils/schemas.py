"""
Pydantic Schemas - Data Validation Models

Defines the schemas used throughout the pipeline:
- User records returned by the users API
- Request bodies for create/update calls

Usage:
    from utils.schemas import UserRecord

    user = UserRecord(**raw_data)
    if user.is_active and user.email_endswith(".test"):
        ...
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """User record as delivered by the API.

    No field is required. `id`, `email` and `status` are kept exactly as
    received, including null or non-string values, so reporters can decide
    what to skip. Additional server fields are preserved but never read.
    """

    id: Any = Field(default=None, description="User ID")
    email: Any = Field(default=None, description="Email address, may be missing or non-string")
    status: Any = Field(default=None, description="Account status, e.g. 'active'")

    class Config:
        extra = "allow"
        frozen = True

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def email_str(self) -> Optional[str]:
        """Email if it is a string, otherwise None."""
        return self.email if isinstance(self.email, str) else None

    def email_endswith(self, suffix: str) -> bool:
        email = self.email_str
        return email is not None and email.endswith(suffix)


class UserPayload(BaseModel):
    """Request body for creating or updating a user.

    All fields are optional so the same schema serves partial updates;
    unset fields are dropped when serialised.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None)
    gender: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
