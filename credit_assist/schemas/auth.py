"""
Pydantic schemas for the mock authentication endpoints.

Login picks one of the demo users by email; the response carries the session
token to send as ``Authorization: Bearer <session_token>``.
"""

from typing import Literal

from pydantic import BaseModel, Field

UserRole = Literal["beneficiary", "officer", "admin"]


class User(BaseModel):
    """A user from the mock directory."""
    id: str = Field(..., description="User id", examples=["usr_001"])
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
    avatar: str = Field(..., description="Avatar image URL")
    role: UserRole = Field(..., description="Role deciding which dashboard the user sees")
    region: str = Field(..., description="State or 'National'")


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, description="Email of a demo user", examples=["beneficiary@example.com"])


class SwitchUserRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="Id of the demo user to switch to", examples=["usr_002"])


class SessionResponse(BaseModel):
    """Response for login, switch and /auth/me."""
    session_token: str = Field(..., description="Opaque session token (Bearer)")
    user: User = Field(..., description="The logged-in user")


class LogoutResponse(BaseModel):
    status: Literal["LOGGED_OUT"] = "LOGGED_OUT"
    redirect_to: str = Field("/login", description="Where the client should navigate next")
