"""Pydantic DTOs for contact form submissions."""

from pydantic import BaseModel, EmailStr, Field, field_validator


class FormResponseCreate(BaseModel):
    """Schema for a public contact form submission."""

    nombre: str = Field(..., min_length=2, description="Sender name")
    email: EmailStr
    empresa: str | None = None
    telefono: str | None = None
    producto: str | None = None
    mensaje: str = Field(..., min_length=10, description="Message body")

    @field_validator("empresa", "telefono", "producto")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        return value or None


class Pagination(BaseModel):
    """Pagination block returned with response listings."""

    page: int
    limit: int
    total: int
    totalPages: int
    hasNext: bool
    hasPrev: bool
