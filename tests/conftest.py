"""Shared fixtures: in-memory EPUB books."""

from collections.abc import Callable

import pytest
from ebooklib import epub


def _build_epub_book(rendition: dict[str, str] | None = None) -> epub.EpubBook:
    book = epub.EpubBook()
    book.set_identifier("test-book")
    book.set_title("Test Book")
    book.set_language("en")
    book.add_author("Jane Doe")
    for prop, value in (rendition or {}).items():
        book.add_metadata(None, "meta", value, {"property": prop})

    chapter1 = epub.EpubHtml(uid="chap1", title="Chapter 1", file_name="chap1.xhtml")
    chapter1.content = "<html><body><h1>Chapter One</h1><p id='s2'>Text</p></body></html>"
    chapter2 = epub.EpubHtml(uid="chap2", title="Chapter 2", file_name="chap2.xhtml")
    chapter2.content = "<html><body><h2>Second Chapter</h2><p>More</p></body></html>"
    book.add_item(chapter1)
    book.add_item(chapter2)

    book.toc = [
        epub.Link("chap1.xhtml", "Chapter 1", "toc-chap1"),
        (
            epub.Section("Part Two"),
            [epub.Link("chap1.xhtml#s2", "Section 2", "toc-s2")],
        ),
    ]
    book.spine = [("chap1", "yes"), ("chap2", "yes"), ("missing", "yes")]
    return book


@pytest.fixture
def make_epub_book() -> Callable[..., epub.EpubBook]:
    """Factory building a small two-chapter EPUB in memory."""
    return _build_epub_book
