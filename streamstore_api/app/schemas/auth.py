"""
Pydantic models for administrator authentication.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., examples=["admin"])
    password: str = Field(..., examples=["strongpassword"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CurrentAdmin(BaseModel):
    sub: str
    role: str
