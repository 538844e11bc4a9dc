"""Pydantic DTOs for the Team section."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


def _check_email(value: str | None) -> str | None:
    # Empty string is the cleared value and stays allowed.
    if value:
        validate_email(value)
    return value


class TeamMemberCreate(BaseModel):
    """Schema for creating a team member."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, examples=["Gerente de Ventas"])
    email: str = Field(..., min_length=1, examples=["ventas@example.com"])
    photo: str = ""
    phone: str = ""

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)


class TeamMemberPatch(BaseModel):
    """Schema for a partial team member update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    role: str | None = None
    email: str | None = None
    photo: str | None = None
    phone: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)
