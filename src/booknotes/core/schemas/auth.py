"""
Authentication schemas.

These schemas define the API contracts for registration and login.
Login only checks presence. Registration also caps the username at 50
characters; there are no charset rules.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Credentials(BaseModel):
    username: str = Field(min_length=1, description="Username")
    password: str = Field(min_length=1, description="User password")

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class RegisterRequest(_Credentials):
    """User registration request schema."""

    username: str = Field(min_length=1, max_length=50, description="Username")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "correct horse battery staple",
            }
        }
    )


class LoginRequest(_Credentials):
    """User login request schema."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "correct horse battery staple",
            }
        }
    )


class TokenResponse(BaseModel):
    """Login response: the signed access token."""

    token: str = Field(description="Signed access token, sent back raw in the Authorization header")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
