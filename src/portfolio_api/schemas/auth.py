"""
Identity Pydantic Schemas
"""

from pydantic import BaseModel
from typing import Optional


class CredentialsRequest(BaseModel):
    """
    Request body for register, signup and login.

    Both fields are optional here so that a missing value is answered with the
    identity endpoints' own ``{success: false, message}`` body.
    """

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class AuthFailureResponse(BaseModel):
    success: bool = False
    message: str


class RegisterResponse(BaseModel):
    success: bool = True
    id: int
    email: str
    message: str = "Account created successfully!"


class LoginResponse(BaseModel):
    success: bool = True
    email: str
    message: str = "Login successful!"
