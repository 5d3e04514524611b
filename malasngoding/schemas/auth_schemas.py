from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from malasngoding.schemas.base import CamelModel
from malasngoding.schemas.user_schemas import UserResponse


class RegisterRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    role: str = "student"


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(CamelModel):
    user: UserResponse
    access_token: str


class LogoutResponse(CamelModel):
    message: str


class AuthTokenPayload(BaseModel):
    sub: str
    exp: Optional[datetime] = None
