"""Request contracts for the account forms.

Registration and login are served by the identity service. These models pin
down the payload rules it enforces; the /auth/*/validate routes check them.
"""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

_PASSWORD_CLASSES = (re.compile(r"[a-z]"), re.compile(r"[A-Z]"), re.compile(r"\d"))


class RegisterRequestDTO(BaseModel):
    name: str = Field(min_length=2, max_length=50, examples=["Jane Doe"])
    email: EmailStr = Field(examples=["jane@example.com"])
    password: str = Field(min_length=8, examples=["Secret123"])

    @field_validator("password")
    @classmethod
    def password_has_required_classes(cls, value: str) -> str:
        if not all(pattern.search(value) for pattern in _PASSWORD_CLASSES):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )
        return value


class LoginRequestDTO(BaseModel):
    email: EmailStr = Field(examples=["jane@example.com"])
    password: str = Field(min_length=1)
