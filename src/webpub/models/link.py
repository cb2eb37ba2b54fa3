"""Link to a resource of a publication."""

from typing import Any

from pydantic import BaseModel, Field

from webpub.errors import ParseError
from webpub.models.json_values import (
    JSONDict,
    as_json_dict,
    make_json,
    optional_str,
    string_list,
)
from webpub.models.properties import Properties


class Link(BaseModel):
    """Resource link from a publication manifest."""

    href: str
    type: str | None = None
    title: str | None = None
    rels: list[str] = Field(default_factory=list)
    properties: Properties = Field(default_factory=Properties)
    children: list["Link"] = Field(default_factory=list)

    @classmethod
    def from_json(cls, document: Any) -> "Link | None":
        """Parse a link, None if the document is absent.

        Raises:
            ParseError: If the document is not an object or has no href
        """
        json_dict = as_json_dict(document, "Link")
        if json_dict is None:
            return None
        href = json_dict.get("href")
        if not isinstance(href, str):
            raise ParseError("Link", "missing href")

        rel = json_dict.get("rel")
        rels = [rel] if isinstance(rel, str) else string_list(rel)

        children_json = json_dict.get("children")
        children = []
        if isinstance(children_json, list):
            for child in children_json:
                link = cls.from_json(child)
                if link is not None:
                    children.append(link)

        return cls(
            href=href,
            type=optional_str(json_dict.get("type")),
            title=optional_str(json_dict.get("title")),
            rels=rels,
            properties=Properties.from_json(json_dict.get("properties")) or Properties(),
            children=children,
        )

    def to_json(self) -> JSONDict:
        return make_json(
            {
                "href": self.href,
                "type": self.type,
                "title": self.title,
                "rel": self.rels,
                "properties": self.properties.to_json(),
                "children": [child.to_json() for child in self.children],
            }
        )
