"""Data models."""

from webpub.models.epub import EPUBLayout
from webpub.models.link import Link
from webpub.models.locator import Locations, Locator, Text
from webpub.models.presentation import (
    Fit,
    Orientation,
    Overflow,
    Page,
    Presentation,
    Spread,
)
from webpub.models.properties import Properties
from webpub.models.publication import ParsedPublication, PublicationMetadata

__all__ = [
    # Locator models
    "Locator",
    "Locations",
    "Text",
    # Link models
    "Link",
    "Properties",
    # Presentation models
    "Presentation",
    "Fit",
    "Orientation",
    "Overflow",
    "Page",
    "Spread",
    "EPUBLayout",
    # Publication models
    "PublicationMetadata",
    "ParsedPublication",
]
