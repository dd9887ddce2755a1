"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime


def _strip_lower(value):
    """Emails compare case-insensitively and without surrounding spaces."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


class UserCreate(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _strip_lower(v)


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _strip_lower(v)


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    email: str
    created_at: datetime
    
    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class PasswordChange(BaseModel):
    """Schema for changing the current user's password."""
    current_password: str
    new_password: str = Field(min_length=6)


class Token(BaseModel):
    """Schema for JWT token response."""
    message: str = "Login successful"
    token: str
