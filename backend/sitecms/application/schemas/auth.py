"""Pydantic DTOs for the admin session endpoints."""

from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
