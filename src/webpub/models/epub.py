"""EPUB vocabulary shared by links and presentation hints."""

from enum import Enum


class EPUBLayout(str, Enum):
    """Layout of the linked resources (EPUB extension)."""

    REFLOWABLE = "reflowable"
    FIXED = "fixed"

    @classmethod
    def from_rendition(cls, value: str | None) -> "EPUBLayout":
        """Map an EPUB `rendition:layout` value to a layout."""
        if value and value.strip() == "pre-paginated":
            return cls.FIXED
        return cls.REFLOWABLE
