from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    email: str = Field(..., description="Email address of the new user")


class User(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str


class ValidateChirpRequest(BaseModel):
    body: str


class CleanedChirp(BaseModel):
    cleaned_body: str


class CreateChirpRequest(BaseModel):
    body: str = Field(..., description="Chirp text, at most 140 characters")
    user_id: UUID = Field(..., description="Author of the chirp")


class Chirp(BaseModel):
    id: UUID
    body: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class ErrorResponse(BaseModel):
    error: str
