"""Link properties."""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, JsonValue

from webpub.models.epub import EPUBLayout
from webpub.models.json_values import (
    JSONDict,
    as_json_dict,
    json_equal,
    make_json,
    parse_raw,
    string_list,
)
from webpub.models.presentation import Page


class Properties(BaseModel):
    """Extension metadata attached to a link.

    Properties has no typed fields of its own: every key of the source
    document is kept in `other_properties`, in its original order. Typed
    accessors for known extensions (EPUB layout, page, contains) read from
    and write to that mapping.
    """

    other_properties: JSONDict = Field(default_factory=dict)

    @classmethod
    def from_json(cls, document: Any) -> "Properties | None":
        """Parse properties, None if the document is absent.

        Raises:
            ParseError: If the document is not a JSON object
        """
        json_dict = as_json_dict(document, "Properties")
        if json_dict is None:
            return None
        return cls(other_properties=json_dict)

    def to_json(self) -> JSONDict:
        return make_json({}, additional=self.other_properties)

    def get(self, key: str) -> JsonValue:
        """Shortcut for `other_properties.get(key)`."""
        return self.other_properties.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        """Set `other_properties[key]`, removing it when value is None."""
        if value is None:
            self.other_properties.pop(key, None)
        else:
            self.other_properties[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return json_equal(self.other_properties, other.other_properties)

    def _set_raw_property(self, key: str, value: Enum | None) -> None:
        self.set(key, value.value if value is not None else None)

    def _set_collection_property(self, key: str, values: Iterable[str] | None) -> None:
        items = list(values) if values is not None else []
        self.set(key, items or None)

    # EPUB extension

    @property
    def layout(self) -> EPUBLayout | None:
        """Layout override for this resource."""
        return parse_raw(EPUBLayout, self.get("layout"))

    def set_layout(self, layout: EPUBLayout | None) -> None:
        self._set_raw_property("layout", layout)

    @property
    def page(self) -> Page | None:
        """Position of the resource in a synthetic spread."""
        return parse_raw(Page, self.get("page"))

    def set_page(self, page: Page | None) -> None:
        self._set_raw_property("page", page)

    @property
    def contains(self) -> list[str]:
        """Resources embedded in this one (e.g. mathml, svg, js)."""
        return string_list(self.get("contains"))

    def set_contains(self, values: Iterable[str] | None) -> None:
        self._set_collection_property("contains", values)
