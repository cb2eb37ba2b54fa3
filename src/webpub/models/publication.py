"""Data models for a parsed publication."""

from pydantic import BaseModel, Field

from webpub.models.link import Link
from webpub.models.presentation import Presentation


class PublicationMetadata(BaseModel):
    """Publication-level metadata."""

    title: str
    authors: list[str] = Field(default_factory=list)
    language: str | None = None
    publisher: str | None = None
    presentation: Presentation = Field(default_factory=Presentation)


class ParsedPublication(BaseModel):
    """Reading order and table of contents of a publication."""

    metadata: PublicationMetadata
    reading_order: list[Link] = Field(default_factory=list)
    toc: list[Link] = Field(default_factory=list)
