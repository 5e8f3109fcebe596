"""
Pure catalogue operations.

The functions in this module never touch session state or rendering
sinks. They take the read-only dataset (or parts of it) and return new
values, which keeps them trivially unit-testable. The controller in
``controller.py`` combines them with the mutable ``CatalogState``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from ..models import ANY, Book, CatalogDataset, FilterCriteria
from .schemas import DetailView, Option


logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize.

    Returns
    -------
    str
        The normalized string (stripped and case-folded). An empty string
        is returned when the input is ``None`` or empty.
    """
    return (s or "").strip().casefold()


def book_matches(book: Book, criteria: FilterCriteria) -> bool:
    """Return True when ``book`` satisfies all three filter criteria."""
    genre_match = criteria.genre == ANY or criteria.genre in book.genres
    # Whitespace only decides emptiness; the substring test uses the raw query.
    title_match = not _norm(criteria.title) or (
        criteria.title.casefold() in book.title.casefold()
    )
    author_match = criteria.author == ANY or book.author == criteria.author
    return genre_match and title_match and author_match


def apply_filter(books: Iterable[Book], criteria: FilterCriteria) -> List[Book]:
    """Filter books by genre, title substring and author.

    Parameters
    ----------
    books : Iterable[Book]
        The source books, usually the full dataset.
    criteria : FilterCriteria
        Genre id or ``"any"``, title substring (may be empty) and author
        id or ``"any"``. All three must hold for a book to be kept.

    Returns
    -------
    List[Book]
        Matching books in their original order. An empty list is a valid
        result, not an error.
    """
    return [b for b in books if book_matches(b, criteria)]


def find_book(books: Iterable[Book], book_id: str) -> Optional[Book]:
    return next((b for b in books if b.id == book_id), None)


def resolve_detail(dataset: CatalogDataset, book_id: str) -> Optional[DetailView]:
    """Resolve a book id to the fields shown in the detail overlay.

    The lookup runs over the full dataset, not over the current matches,
    so a book hidden by a later filter still resolves.

    Parameters
    ----------
    dataset : CatalogDataset
        The read-only catalogue.
    book_id : str
        Exact book identifier.

    Returns
    -------
    Optional[DetailView]
        The detail fields, or ``None`` when no book has that id or when
        the book's author or one of its genres is missing from its
        mapping.
    """
    book = find_book(dataset.books, book_id)
    if book is None:
        logger.info("No book with id %r", book_id)
        return None

    author_name = dataset.authors.get(book.author)
    if author_name is None:
        logger.warning(
            "Book %r references unknown author %r", book.id, book.author
        )
        return None

    unknown_genres = [g for g in book.genres if g not in dataset.genres]
    if unknown_genres:
        logger.warning(
            "Book %r references unknown genres %r", book.id, unknown_genres
        )
        return None

    year = book.published.year
    return DetailView(
        id=book.id,
        image=book.image,
        title=book.title,
        subtitle=f"{author_name} ({year})",
        description=book.description,
        author=author_name,
        year=year,
    )


def build_options(
    mapping: Mapping[str, str], default_id: str, default_label: str
) -> List[Option]:
    """Build selector options, prefixed with a "no constraint" entry.

    Entries follow the mapping's insertion order.
    """
    options = [Option(id=default_id, label=default_label)]
    options.extend(Option(id=key, label=name) for key, name in mapping.items())
    return options


def genre_options(dataset: CatalogDataset) -> List[Option]:
    return build_options(dataset.genres, ANY, "All Genres")


def author_options(dataset: CatalogDataset) -> List[Option]:
    return build_options(dataset.authors, ANY, "All Authors")
