"""Pydantic DTOs for the Client section."""

from pydantic import BaseModel, ConfigDict, Field


class ClientCreate(BaseModel):
    """Schema for creating a client showcase entry."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, examples=["Hospital Central"])
    logo: str = Field(..., min_length=1)
    type: str = Field("", examples=["Hospital", "Laboratorio"])


class ClientPatch(BaseModel):
    """Schema for a partial client update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    logo: str | None = None
    type: str | None = None
