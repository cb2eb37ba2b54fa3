"""Locator model.

A Locator points to a precise location in a publication. See
https://github.com/readium/architecture/tree/master/locators
"""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, JsonValue

from webpub.errors import ParseError
from webpub.models.json_values import (
    JSONDict,
    as_json_dict,
    decode_json_string,
    encode_json_string,
    json_equal,
    make_json,
    optional_float,
    optional_int,
    optional_str,
    string_list,
)

if TYPE_CHECKING:
    from webpub.models.link import Link

log = logging.getLogger(__name__)


class Locations(BaseModel):
    """Alternative expressions of a location in a resource."""

    fragments: list[str] = Field(default_factory=list)
    progression: float | None = None  # in the resource, between 0 and 1
    total_progression: float | None = None  # in the publication, between 0 and 1
    position: int | None = None  # index in the publication, >= 1
    other_locations: JSONDict = Field(default_factory=dict)

    @classmethod
    def from_json(cls, document: Any) -> "Locations | None":
        """Parse locations, None if the document is absent.

        Known keys with an unexpected type are ignored. Every other key is
        kept in `other_locations`. A legacy `fragment` string is appended
        to `fragments`.

        Raises:
            ParseError: If the document is not a JSON object
        """
        json_dict = as_json_dict(document, "Locations")
        if json_dict is None:
            return None

        fragments = string_list(json_dict.pop("fragments", None))
        fragment = json_dict.pop("fragment", None)
        if isinstance(fragment, str):
            fragments.append(fragment)

        return cls(
            fragments=fragments,
            progression=optional_float(json_dict.pop("progression", None)),
            total_progression=optional_float(json_dict.pop("totalProgression", None)),
            position=optional_int(json_dict.pop("position", None)),
            other_locations=json_dict,
        )

    @classmethod
    def from_json_string(cls, text: str) -> "Locations":
        """Parse locations from a JSON string, empty if it is invalid."""
        try:
            locations = cls.from_json(decode_json_string(text, "Locations"))
        except ParseError as e:
            log.error("%s", e)
            return cls()
        return locations or cls()

    @property
    def is_empty(self) -> bool:
        return not self.to_json()

    def to_json(self) -> JSONDict:
        return make_json(
            {
                "fragments": self.fragments,
                "progression": self.progression,
                "totalProgression": self.total_progression,
                "position": self.position,
            },
            additional=self.other_locations,
        )

    def to_json_string(self) -> str | None:
        return encode_json_string(self.to_json())

    def get(self, key: str) -> JsonValue:
        """Shortcut for `other_locations.get(key)`.

        Typed fields are never read, even for a key such as "position".
        """
        return self.other_locations.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        """Set `other_locations[key]`, removing it when value is None.

        A key named like a typed field (e.g. "position") is stored apart
        from it. When both are set, `to_json` writes the typed value, so
        such a key does not survive a round-trip through JSON.
        """
        if value is None:
            self.other_locations.pop(key, None)
        else:
            self.other_locations[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locations):
            return NotImplemented
        return (
            self.fragments == other.fragments
            and self.progression == other.progression
            and self.total_progression == other.total_progression
            and self.position == other.position
            and json_equal(self.other_locations, other.other_locations)
        )

    # Backward compatibility property
    @property
    def fragment(self) -> str | None:
        """Deprecated: Use fragments[0] instead."""
        return self.fragments[0] if self.fragments else None


class Text(BaseModel):
    """Textual context of a locator."""

    before: str | None = None
    highlight: str | None = None
    after: str | None = None

    @classmethod
    def from_json(cls, document: Any) -> "Text | None":
        """Parse text context, None if the document is absent.

        Raises:
            ParseError: If the document is not a JSON object
        """
        json_dict = as_json_dict(document, "Text")
        if json_dict is None:
            return None
        return cls(
            before=optional_str(json_dict.get("before")),
            highlight=optional_str(json_dict.get("highlight")),
            after=optional_str(json_dict.get("after")),
        )

    @classmethod
    def from_json_string(cls, text: str) -> "Text":
        """Parse text context from a JSON string, empty if it is invalid."""
        try:
            parsed = cls.from_json(decode_json_string(text, "Text"))
        except ParseError as e:
            log.error("%s", e)
            return cls()
        return parsed or cls()

    @property
    def is_empty(self) -> bool:
        return not self.to_json()

    def to_json(self) -> JSONDict:
        return make_json(
            {
                "before": self.before,
                "highlight": self.highlight,
                "after": self.after,
            }
        )

    def to_json_string(self) -> str | None:
        return encode_json_string(self.to_json())


class Locator(BaseModel):
    """Precise location in a publication."""

    href: str
    type: str
    title: str | None = None
    locations: Locations = Field(default_factory=Locations)
    text: Text = Field(default_factory=Text)

    @classmethod
    def from_json(cls, document: Any) -> "Locator | None":
        """Parse a locator, None if the document is absent.

        Raises:
            ParseError: If the document is not an object, lacks a string
                href or type, or has invalid locations or text
        """
        json_dict = as_json_dict(document, "Locator")
        if json_dict is None:
            return None

        href = json_dict.get("href")
        media_type = json_dict.get("type")
        if not isinstance(href, str) or not isinstance(media_type, str):
            raise ParseError("Locator", "href and type are required")

        return cls(
            href=href,
            type=media_type,
            title=optional_str(json_dict.get("title")),
            locations=Locations.from_json(json_dict.get("locations")) or Locations(),
            text=Text.from_json(json_dict.get("text")) or Text(),
        )

    @classmethod
    def from_json_string(cls, text: str) -> "Locator | None":
        """Parse a locator from a JSON string.

        Raises:
            ParseError: If the string is not valid JSON or not a locator
        """
        try:
            document = decode_json_string(text, "Locator")
        except ParseError as e:
            log.error("%s", e)
            raise
        return cls.from_json(document)

    @classmethod
    def from_link(cls, link: "Link") -> "Locator":
        """Create a locator pointing to a link.

        A fragment in the link's href becomes the only fragment of the
        locator's locations.
        """
        href, _, fragment = link.href.partition("#")
        locations = Locations(fragments=[fragment]) if fragment else Locations()
        return cls(
            href=href,
            type=link.type or "",
            title=link.title,
            locations=locations,
        )

    def to_json(self) -> JSONDict:
        return make_json(
            {
                "href": self.href,
                "type": self.type,
                "title": self.title,
                "locations": self.locations.to_json(),
                "text": self.text.to_json(),
            }
        )

    def to_json_string(self, indent: int | None = None) -> str | None:
        return encode_json_string(self.to_json(), indent=indent)

    def __str__(self) -> str:
        return self.to_json_string() or "{}"
