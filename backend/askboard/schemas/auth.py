# askboard/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
"""
from pydantic import BaseModel, Field, field_validator, model_validator


class RegisterIn(BaseModel):
    """Request body for account registration. All fields required."""
    username: str = Field(min_length=3, max_length=64)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=256)
    password: str = Field(min_length=6)

    @field_validator("username", "email", mode="before")
    @classmethod
    def _strip(cls, value):
        # length and pattern checks apply to the trimmed value
        return value.strip() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    """
    Request body for login.
    The account is looked up by username, or by email when username is absent.
    """
    username: str | None = None
    email: str | None = None
    password: str

    @model_validator(mode="after")
    def _need_identifier(self):
        if not self.username and not self.email:
            raise ValueError("username or email required")
        return self


class ChangePasswordIn(BaseModel):
    currentPassword: str
    newPassword: str = Field(min_length=6)
