"""Pydantic DTOs for the Product section."""

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Schema for creating a product. Unknown fields are kept on the item."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(..., min_length=1, examples=["Microscopio X"])
    description: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1, examples=["/uploads/products/x.png"])
    features: list[str] = Field(default_factory=list, examples=[["Óptica 4K", "LED"]])


class ProductPatch(BaseModel):
    """Schema for a partial product update: only listed fields are patchable."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    image: str | None = None
    features: list[str] | None = None
