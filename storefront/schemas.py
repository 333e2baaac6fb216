"""Pydantic schemas for API."""
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Surrounding whitespace is dropped before the length check, so "ab " is too short.
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]
PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


# Base schemas
class UserBase(BaseModel):
    username: Username
    first_name: PersonName
    last_name: PersonName


class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=256)


class UserResponse(UserBase):
    id: UUID
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


# Auth schemas
class LoginRequest(BaseModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True)]
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class HealthResponse(BaseModel):
    status: str
    database: str
