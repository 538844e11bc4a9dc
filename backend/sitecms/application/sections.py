"""Registry of the CRUD-managed sections of the site document."""

from dataclasses import dataclass, field

from pydantic import BaseModel

from sitecms.application.schemas import (
    BrandCreate,
    BrandPatch,
    ClientCreate,
    ClientPatch,
    ProductCreate,
    ProductPatch,
    TeamMemberCreate,
    TeamMemberPatch,
)
from sitecms.domain.entities import Item, slugify


@dataclass(frozen=True)
class SectionDefinition:
    """How one document section is exposed over HTTP."""

    path: str
    section_key: str
    resource_name: str
    create_schema: type[BaseModel]
    patch_schema: type[BaseModel]
    required_fields: tuple[str, ...] = ()
    id_source: str | None = None
    default_new_item: dict = field(default_factory=dict)

    def missing_fields(self, data: Item) -> list[str]:
        return [name for name in self.required_fields if not data.get(name)]

    def validate_required(self, data: Item) -> tuple[bool, str | None]:
        """Repository create validator: every required field present and non-empty."""
        missing = self.missing_fields(data)
        if missing:
            return False, f"Missing required fields: {', '.join(missing)}"
        return True, None

    def generate_id(self, data: Item) -> str:
        """Slug of the configured source field; ``name``/``title`` otherwise."""
        if self.id_source:
            return slugify(str(data.get(self.id_source) or ""))
        source = "name" if "name" in data else "title"
        return slugify(str(data.get(source) or ""))


PRODUCTS = SectionDefinition(
    path="products",
    section_key="featuredProducts",
    resource_name="product",
    create_schema=ProductCreate,
    patch_schema=ProductPatch,
    required_fields=("title", "description", "image"),
    id_source="title",
    default_new_item={"title": "", "description": "", "image": "", "features": []},
)

BRANDS = SectionDefinition(
    path="brands",
    section_key="featuredBrands",
    resource_name="brand",
    create_schema=BrandCreate,
    patch_schema=BrandPatch,
    required_fields=("name", "description"),
    default_new_item={
        "name": "",
        "description": "",
        "logo": "",
        "bestSellers": [{"name": "", "category": ""}],
        "href": "",
    },
)

CLIENTS = SectionDefinition(
    path="clients",
    section_key="featuredClients",
    resource_name="client",
    create_schema=ClientCreate,
    patch_schema=ClientPatch,
    required_fields=("name", "logo"),
    default_new_item={"name": "", "logo": "", "type": ""},
)

TEAM = SectionDefinition(
    path="team",
    section_key="featuredTeam",
    resource_name="team member",
    create_schema=TeamMemberCreate,
    patch_schema=TeamMemberPatch,
    required_fields=("name", "role", "email"),
    default_new_item={"name": "", "role": "", "photo": "", "email": "", "phone": ""},
)

SECTIONS: tuple[SectionDefinition, ...] = (PRODUCTS, BRANDS, CLIENTS, TEAM)


def get_section(path: str) -> SectionDefinition:
    for definition in SECTIONS:
        if definition.path == path:
            return definition
    raise KeyError(path)
