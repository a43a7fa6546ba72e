"""Pydantic schemas for user API."""
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for creating or replacing a user. senha is hashed before storage."""

    usuario: str = Field(..., min_length=3, max_length=50)
    senha: str = Field(..., min_length=4, max_length=255)


UserUpdate = UserCreate


class UserResponse(BaseModel):
    """User in API responses. The password hash is never exposed."""

    id: int
    usuario: str
