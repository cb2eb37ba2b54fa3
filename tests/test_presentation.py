"""Tests for Presentation hints and layout resolution."""

import pytest
from pydantic import ValidationError

from webpub.errors import ParseError
from webpub.models.epub import EPUBLayout
from webpub.models.link import Link
from webpub.models.presentation import (
    Fit,
    Orientation,
    Overflow,
    Presentation,
    Spread,
)
from webpub.models.properties import Properties


def _link(layout: EPUBLayout | None = None) -> Link:
    properties = Properties()
    properties.set_layout(layout)
    return Link(href="page1.xhtml", type="application/xhtml+xml", properties=properties)


def test_parse_none_gives_no_hints():
    assert Presentation.from_json(None) == Presentation()


def test_parse_empty_object():
    presentation = Presentation.from_json({})

    assert presentation == Presentation()
    assert presentation.to_json() == {}


def test_parse_full():
    presentation = Presentation.from_json(
        {
            "clipped": True,
            "continuous": False,
            "fit": "cover",
            "orientation": "landscape",
            "overflow": "paginated",
            "spread": "both",
            "layout": "fixed",
        }
    )

    assert presentation == Presentation(
        clipped=True,
        continuous=False,
        fit=Fit.COVER,
        orientation=Orientation.LANDSCAPE,
        overflow=Overflow.PAGINATED,
        spread=Spread.BOTH,
        layout=EPUBLayout.FIXED,
    )


@pytest.mark.parametrize("document", ["fixed", 1, [{"layout": "fixed"}]])
def test_parse_requires_object(document):
    with pytest.raises(ParseError) as exc_info:
        Presentation.from_json(document)
    assert exc_info.value.type_name == "Presentation"


def test_unknown_enum_value_is_absent():
    presentation = Presentation.from_json({"fit": "squash", "spread": "both"})

    assert presentation.fit is None
    assert presentation.spread == Spread.BOTH


def test_wrong_typed_values_are_absent():
    presentation = Presentation.from_json(
        {"clipped": "yes", "continuous": 1, "orientation": 3, "layout": None}
    )

    assert presentation == Presentation()


def test_to_json_writes_raw_values():
    presentation = Presentation(
        continuous=True,
        overflow=Overflow.SCROLLED,
        layout=EPUBLayout.REFLOWABLE,
    )

    assert presentation.to_json() == {
        "continuous": True,
        "overflow": "scrolled",
        "layout": "reflowable",
    }


def test_to_json_keeps_false_booleans():
    assert Presentation(clipped=False).to_json() == {"clipped": False}


def test_round_trip():
    presentation = Presentation(
        clipped=False,
        fit=Fit.WIDTH,
        orientation=Orientation.AUTO,
        spread=Spread.NONE,
    )

    assert Presentation.from_json(presentation.to_json()) == presentation


def test_presentation_is_frozen():
    presentation = Presentation()

    with pytest.raises(ValidationError):
        presentation.layout = EPUBLayout.FIXED


def test_defaults():
    assert Presentation.DEFAULT_CLIPPED is False
    assert Presentation.DEFAULT_CONTINUOUS is True
    assert Presentation.DEFAULT_FIT == Fit.CONTAIN
    assert Presentation.DEFAULT_ORIENTATION == Orientation.AUTO
    assert Presentation.DEFAULT_OVERFLOW == Overflow.AUTO
    assert Presentation.DEFAULT_SPREAD == Spread.AUTO


# ---------------------------------------------------------------------------
# layout_of
# ---------------------------------------------------------------------------


def test_layout_of_defaults_to_reflowable():
    assert Presentation().layout_of(_link()) == EPUBLayout.REFLOWABLE


def test_layout_of_uses_publication_layout():
    presentation = Presentation(layout=EPUBLayout.FIXED)

    assert presentation.layout_of(_link()) == EPUBLayout.FIXED


@pytest.mark.parametrize(
    "publication_layout",
    [None, EPUBLayout.FIXED, EPUBLayout.REFLOWABLE],
)
def test_layout_of_link_override_wins(publication_layout):
    presentation = Presentation(layout=publication_layout)

    assert presentation.layout_of(_link(EPUBLayout.FIXED)) == EPUBLayout.FIXED
    assert presentation.layout_of(_link(EPUBLayout.REFLOWABLE)) == EPUBLayout.REFLOWABLE


def test_layout_of_ignores_unknown_link_layout():
    link = Link.from_json({"href": "a.xhtml", "properties": {"layout": "scrolled"}})

    assert Presentation(layout=EPUBLayout.FIXED).layout_of(link) == EPUBLayout.FIXED


# ---------------------------------------------------------------------------
# EPUBLayout
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value,expected",
    [
        ("pre-paginated", EPUBLayout.FIXED),
        (" pre-paginated ", EPUBLayout.FIXED),
        ("reflowable", EPUBLayout.REFLOWABLE),
        ("", EPUBLayout.REFLOWABLE),
        (None, EPUBLayout.REFLOWABLE),
    ],
)
def test_layout_from_rendition(value, expected):
    assert EPUBLayout.from_rendition(value) == expected
