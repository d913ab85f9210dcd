"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules and the API layer.
"""

import re
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72
MIN_PASSWORD_LENGTH = 8

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"\d")


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups."""
    return email.strip().lower()


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload.

    The signature covers every field, so none of them can be altered
    without invalidating the token.
    """

    sub: str = Field(..., description="Subject (account ID)")
    email: str = Field(..., description="Account email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class Account(BaseModel):
    """
    A registered account as stored in the users table.

    password_hash is opaque outside of the password hasher.
    """

    id: str
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SignupRequest(BaseModel):
    """User registration data."""

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Password (letters and numbers, 8+ chars)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH or not _LETTER.search(v) or not _DIGIT.search(v):
            raise ValueError("Password must include letters and numbers")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class SigninRequest(BaseModel):
    """Signin credentials."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class AccountSummary(BaseModel):
    """Account data returned to clients (no sensitive fields)."""

    id: str
    email: str


class SignupResponse(BaseModel):
    message: str
    user: AccountSummary


class SigninResponse(BaseModel):
    message: str
    token: str
