"""Presentation hints for a publication.

See https://readium.org/webpub-manifest/extensions/presentation.html

The fields are nullable so that a publication which does not specify a hint
is distinguishable from one using the default value. Navigators needing a
value can fall back on the `DEFAULT_*` class attributes.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict

from webpub.models.epub import EPUBLayout
from webpub.models.json_values import (
    JSONDict,
    as_json_dict,
    make_json,
    optional_bool,
    parse_raw,
)

if TYPE_CHECKING:
    from webpub.models.link import Link


class Fit(str, Enum):
    """Suggested method for constraining a resource inside the viewport."""

    CONTAIN = "contain"  # scaled to fit both dimensions
    COVER = "cover"  # scaled to fill the viewport
    WIDTH = "width"
    HEIGHT = "height"


class Orientation(str, Enum):
    """Suggested device orientation."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    AUTO = "auto"


class Overflow(str, Enum):
    """How overflowing content is handled."""

    PAGINATED = "paginated"
    SCROLLED = "scrolled"
    AUTO = "auto"


class Page(str, Enum):
    """Side of a synthetic spread the resource is displayed on."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Spread(str, Enum):
    """Condition for rendering a resource within a synthetic spread."""

    LANDSCAPE = "landscape"  # only in landscape mode
    BOTH = "both"
    NONE = "none"
    AUTO = "auto"


class Presentation(BaseModel):
    """Rendering hints for the resources of a publication."""

    model_config = ConfigDict(frozen=True)

    DEFAULT_CLIPPED: ClassVar[bool] = False
    DEFAULT_CONTINUOUS: ClassVar[bool] = True
    DEFAULT_FIT: ClassVar[Fit] = Fit.CONTAIN
    DEFAULT_ORIENTATION: ClassVar[Orientation] = Orientation.AUTO
    DEFAULT_OVERFLOW: ClassVar[Overflow] = Overflow.AUTO
    DEFAULT_SPREAD: ClassVar[Spread] = Spread.AUTO

    clipped: bool | None = None
    continuous: bool | None = None
    fit: Fit | None = None
    orientation: Orientation | None = None
    overflow: Overflow | None = None
    spread: Spread | None = None
    layout: EPUBLayout | None = None

    @classmethod
    def from_json(cls, document: Any) -> "Presentation":
        """Parse presentation hints.

        An absent document gives a Presentation with no hints. Unknown
        enumeration values are ignored.

        Raises:
            ParseError: If the document is present but not a JSON object
        """
        json_dict = as_json_dict(document, "Presentation")
        if json_dict is None:
            return cls()

        return cls(
            clipped=optional_bool(json_dict.get("clipped")),
            continuous=optional_bool(json_dict.get("continuous")),
            fit=parse_raw(Fit, json_dict.get("fit")),
            orientation=parse_raw(Orientation, json_dict.get("orientation")),
            overflow=parse_raw(Overflow, json_dict.get("overflow")),
            spread=parse_raw(Spread, json_dict.get("spread")),
            layout=parse_raw(EPUBLayout, json_dict.get("layout")),
        )

    def to_json(self) -> JSONDict:
        return make_json(
            {
                "clipped": self.clipped,
                "continuous": self.continuous,
                "fit": self.fit,
                "orientation": self.orientation,
                "overflow": self.overflow,
                "spread": self.spread,
                "layout": self.layout,
            }
        )

    def layout_of(self, link: "Link") -> EPUBLayout:
        """Determine the layout of the given resource in this publication.

        The link's own override wins, then the publication layout, then
        reflowable.
        """
        override = link.properties.layout
        if override is not None:
            return override
        if self.layout is not None:
            return self.layout
        return EPUBLayout.REFLOWABLE
