from .section_repository import (
    CreateValidator,
    DocumentSectionRepository,
    IdGenerator,
    SectionRepositoryConfig,
)

__all__ = [
    "CreateValidator",
    "DocumentSectionRepository",
    "IdGenerator",
    "SectionRepositoryConfig",
]
