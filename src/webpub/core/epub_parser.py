"""EPUB parsing using ebooklib."""

import logging
import warnings
from collections.abc import Iterator
from pathlib import Path

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from ebooklib import epub

from webpub.models.epub import EPUBLayout
from webpub.models.json_values import parse_raw
from webpub.models.link import Link
from webpub.models.locator import Locator
from webpub.models.presentation import Orientation, Overflow, Presentation, Spread
from webpub.models.publication import ParsedPublication, PublicationMetadata

# Suppress XML parsing warnings - EPUB files often use XHTML
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

log = logging.getLogger(__name__)

# "portrait" was deprecated in EPUB 3.1 and is treated as "both"
RENDITION_SPREADS = {
    "none": Spread.NONE,
    "landscape": Spread.LANDSCAPE,
    "portrait": Spread.BOTH,
    "both": Spread.BOTH,
    "auto": Spread.AUTO,
}

# rendition:flow -> (overflow, continuous)
RENDITION_FLOWS: dict[str, tuple[Overflow, bool | None]] = {
    "paginated": (Overflow.PAGINATED, False),
    "scrolled-continuous": (Overflow.SCROLLED, True),
    "scrolled-doc": (Overflow.SCROLLED, False),
    "auto": (Overflow.AUTO, None),
}


class EpubParser:
    """Read the reading order, TOC and presentation hints of an EPUB."""

    def __init__(self, book: epub.EpubBook, path: Path | None = None):
        self.book = book
        self.path = path

    @classmethod
    def from_path(cls, epub_path: Path) -> "EpubParser":
        return cls(epub.read_epub(str(epub_path)), path=epub_path)

    def parse(self) -> ParsedPublication:
        """Parse the EPUB and return its links and metadata."""
        return ParsedPublication(
            metadata=self._get_metadata(),
            reading_order=self._get_reading_order(),
            toc=self._get_toc(),
        )

    def toc_locators(self) -> list[Locator]:
        """Locators for every TOC entry with an href, depth-first."""
        return [
            Locator.from_link(link)
            for link in iter_links(self._get_toc())
            if link.href
        ]

    def _get_metadata(self) -> PublicationMetadata:
        """Extract publication metadata."""
        title = self.book.get_metadata("DC", "title")
        authors = self.book.get_metadata("DC", "creator")
        language = self.book.get_metadata("DC", "language")
        publisher = self.book.get_metadata("DC", "publisher")

        return PublicationMetadata(
            title=title[0][0] if title else "Unknown Title",
            authors=[a[0] for a in authors] if authors else [],
            language=language[0][0] if language else None,
            publisher=publisher[0][0] if publisher else None,
            presentation=self._get_presentation(),
        )

    def _get_rendition_properties(self) -> dict[str, str]:
        """Collect `<meta property="rendition:...">` values, first wins."""
        properties: dict[str, str] = {}
        for names in self.book.metadata.values():
            for entries in names.values():
                for value, attributes in entries:
                    prop = (attributes or {}).get("property", "")
                    if prop.startswith("rendition:") and value and prop not in properties:
                        properties[prop] = value.strip()
        return properties

    def _get_presentation(self) -> Presentation:
        """Build presentation hints from the rendition metadata."""
        rendition = self._get_rendition_properties()

        layout = None
        if "rendition:layout" in rendition:
            layout = EPUBLayout.from_rendition(rendition["rendition:layout"])

        overflow, continuous = RENDITION_FLOWS.get(
            rendition.get("rendition:flow", ""), (None, None)
        )

        return Presentation(
            continuous=continuous,
            orientation=parse_raw(Orientation, rendition.get("rendition:orientation")),
            overflow=overflow,
            spread=RENDITION_SPREADS.get(rendition.get("rendition:spread", "")),
            layout=layout,
        )

    def _get_toc(self) -> list[Link]:
        """Extract hierarchical table of contents."""
        return self._parse_toc_recursive(self.book.toc)

    def _parse_toc_recursive(self, toc_items: list) -> list[Link]:
        """Recursively parse TOC structure."""
        links = []

        for item in toc_items:
            children: list[Link] = []
            if isinstance(item, tuple):
                # Section with children: (Section, [children])
                item, child_items = item
                children = self._parse_toc_recursive(child_items)

            href = item.href or ""
            links.append(
                Link(
                    href=href,
                    type=self._media_type_of(href),
                    title=item.title or None,
                    children=children,
                )
            )

        return links

    def _get_reading_order(self) -> list[Link]:
        """Get reading order links from the spine."""
        toc_titles = self._build_toc_title_map()
        links = []

        for entry in self.book.spine:
            # Spine entries are (idref, linear) once read, items or ids when built
            ref = entry[0] if isinstance(entry, tuple) else entry
            if isinstance(ref, epub.EpubItem):
                item = ref
            else:
                item = self.book.get_item_with_id(ref)
            if item is None:
                log.debug("Skipping spine entry without manifest item: %s", ref)
                continue

            file_name = item.get_name()
            links.append(
                Link(
                    href=file_name,
                    type=item.media_type,
                    title=toc_titles.get(file_name)
                    or self._extract_title_from_content(item),
                )
            )

        return links

    def _media_type_of(self, href: str) -> str | None:
        file_ref = href.split("#")[0]
        if not file_ref:
            return None
        item = self.book.get_item_with_href(file_ref)
        return item.media_type if item is not None else None

    def _build_toc_title_map(self) -> dict[str, str]:
        """Build a map of file names to TOC titles."""
        title_map: dict[str, str] = {}
        for link in iter_links(self._get_toc()):
            file_ref = link.href.split("#")[0]
            if file_ref and link.title and file_ref not in title_map:
                title_map[file_ref] = link.title
        return title_map

    def _extract_title_from_content(self, item: epub.EpubItem) -> str | None:
        """Try to extract title from HTML content."""
        if not item.content:
            return None
        soup = BeautifulSoup(item.content, "lxml")
        # Try h1 first, then h2, then title tag
        for tag in ["h1", "h2", "title"]:
            element = soup.find(tag)
            if element:
                text = element.get_text(strip=True)
                if text:
                    return text
        return None


def iter_links(links: list[Link]) -> Iterator[Link]:
    """Walk links and their children depth-first."""
    for link in links:
        yield link
        yield from iter_links(link.children)
