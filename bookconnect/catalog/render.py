"""
Preview rendering and the view sinks the controller writes to.

``render_preview`` is a pure function of four flat attributes: given the
same id, title, author name and image it always produces the same
fragment. Re-rendering when an attribute changes is the caller's
business.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Protocol, Sequence

from jinja2 import Environment, select_autoescape

from ..models import Book
from .schemas import DetailView, PreviewAttributes, PreviewItem, ShowMoreButton


logger = logging.getLogger(__name__)

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))

PREVIEW_TEMPLATE = _env.from_string(
    '<button class="preview" data-preview="{{ id }}">'
    '<img class="preview__image" src="{{ image }}" />'
    '<div class="preview__info">'
    '<h3 class="preview__title">{{ title }}</h3>'
    '<div class="preview__author">{{ author }}</div>'
    "</div>"
    "</button>"
)


def preview_attributes(
    book: Book, authors: Mapping[str, str]
) -> Optional[PreviewAttributes]:
    """Resolve the attributes of a preview item, or None on a missing author."""
    author_name = authors.get(book.author)
    if author_name is None:
        logger.warning(
            "Skipping preview of %r: unknown author %r", book.id, book.author
        )
        return None
    return PreviewAttributes(
        id=book.id, title=book.title, author=author_name, image=book.image
    )


def render_preview(attrs: PreviewAttributes) -> PreviewItem:
    html = PREVIEW_TEMPLATE.render(
        id=attrs.id, title=attrs.title, author=attrs.author, image=attrs.image
    )
    return PreviewItem(**attrs.model_dump(), html=html)


def render_previews(
    books: Sequence[Book], authors: Mapping[str, str]
) -> List[PreviewItem]:
    """Render a window of books; books with broken author data are skipped."""
    items: List[PreviewItem] = []
    for book in books:
        attrs = preview_attributes(book, authors)
        if attrs is not None:
            items.append(render_preview(attrs))
    return items


class ViewSink(Protocol):
    def replace(self, items: Sequence[PreviewItem]) -> None: ...

    def append(self, items: Sequence[PreviewItem]) -> None: ...

    def set_empty_message(self, visible: bool) -> None: ...

    def set_show_more(self, button: ShowMoreButton) -> None: ...

    def show_detail(self, detail: DetailView) -> None: ...

    def set_detail_open(self, is_open: bool) -> None: ...


class ListView:
    """In-memory rendering sink holding what the client currently shows."""

    def __init__(self) -> None:
        self.items: List[PreviewItem] = []
        self.empty_message = False
        self.show_more: Optional[ShowMoreButton] = None
        self.detail: Optional[DetailView] = None
        self.detail_open = False

    def replace(self, items: Sequence[PreviewItem]) -> None:
        self.items = list(items)

    def append(self, items: Sequence[PreviewItem]) -> None:
        self.items.extend(items)

    def set_empty_message(self, visible: bool) -> None:
        self.empty_message = visible

    def set_show_more(self, button: ShowMoreButton) -> None:
        self.show_more = button

    def show_detail(self, detail: DetailView) -> None:
        self.detail = detail

    def set_detail_open(self, is_open: bool) -> None:
        self.detail_open = is_open
