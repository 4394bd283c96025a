"""Pydantic DTOs for login, logout and session status."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthUserResponse(BaseModel):
    name: str
    role: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    user: AuthUserResponse


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logout successful"


class SessionStatusResponse(BaseModel):
    authenticated: bool
    message: str
    user: AuthUserResponse | None = None
    expires_at: datetime | None = None
