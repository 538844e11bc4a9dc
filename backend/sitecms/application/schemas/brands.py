"""Pydantic DTOs for the Brand section."""

from pydantic import BaseModel, ConfigDict, Field


class BestSeller(BaseModel):
    """Nested best-seller entry; ids are only unique within their brand."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str = ""
    category: str = ""


class BrandCreate(BaseModel):
    """Schema for creating a brand."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., min_length=1, examples=["Olympus"])
    description: str = Field(..., min_length=1)
    logo: str = ""
    href: str = ""
    best_sellers: list[BestSeller] = Field(default_factory=list, alias="bestSellers")


class BrandPatch(BaseModel):
    """Schema for a partial brand update."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str | None = None
    description: str | None = None
    logo: str | None = None
    href: str | None = None
    best_sellers: list[BestSeller] | None = Field(None, alias="bestSellers")
