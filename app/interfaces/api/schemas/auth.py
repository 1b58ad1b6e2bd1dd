"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field

from .user import UserRead


class Credentials(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(Credentials):
    password: str = Field(..., description="At least 8 characters")


class LoginRequest(Credentials):
    pass


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AuthResponse(Token):
    user: UserRead


class LogoutResponse(BaseModel):
    success: bool = True
