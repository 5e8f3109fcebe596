from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

import pytest

from bookconnect.models import Book, CatalogDataset


def make_book(
    book_id: str,
    title: Optional[str] = None,
    author: str = "a1",
    genres: Sequence[str] = ("g1",),
    year: int = 2001,
) -> Book:
    return Book(
        id=book_id,
        title=title or f"Book {book_id}",
        author=author,
        image=f"https://example.com/{book_id}.jpg",
        description=f"About {book_id}",
        published=datetime(year, 6, 1, tzinfo=timezone.utc),
        genres=tuple(genres),
    )


def make_dataset(
    books: List[Book],
    page_size: int = 20,
    authors: Optional[Dict[str, str]] = None,
    genres: Optional[Dict[str, str]] = None,
) -> CatalogDataset:
    return CatalogDataset(
        books=tuple(books),
        authors=authors if authors is not None else {"a1": "Ann Author", "a2": "Bob Writer"},
        genres=genres if genres is not None else {"g1": "Fiction", "g2": "History"},
        page_size=page_size,
    )


@pytest.fixture
def small_dataset() -> CatalogDataset:
    return make_dataset(
        [
            make_book("1", "Dune", author="a1", genres=("g1",), year=1965),
            make_book("2", "Dune Messiah", author="a1", genres=("g1", "g2"), year=1969),
            make_book("3", "Rome", author="a2", genres=("g2",), year=2015),
            make_book("4", "The Dunes of Normandy", author="a2", genres=("g2",), year=1999),
        ],
        page_size=2,
    )
