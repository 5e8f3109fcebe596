"""
Catalog controller: the only component holding mutable list state.

``CatalogState`` records which books the last filter matched and how many
page-sized windows of them have been rendered. The controller mutates it
in exactly three places (``initialize``, ``apply_filter`` and
``paginate``) and pushes the resulting view to a ``ViewSink``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import Book, CatalogDataset, FilterCriteria
from . import store
from .render import ViewSink, render_previews
from .schemas import DetailView, Option, PreviewItem, ShowMoreButton


logger = logging.getLogger(__name__)

SHOW_MORE_TEXT = "Show more"


@dataclass
class CatalogState:
    matches: List[Book] = field(default_factory=list)
    page: int = 1
    # True once a search has been submitted; an empty ``matches`` only
    # means "nothing found" when this is set.
    filtered: bool = False


class CatalogController:
    def __init__(self, dataset: CatalogDataset, sink: ViewSink) -> None:
        self.dataset = dataset
        self.sink = sink
        self.state = CatalogState(matches=list(dataset.books))

    @property
    def page_size(self) -> int:
        return self.dataset.page_size

    def remaining(self) -> int:
        return max(len(self.state.matches) - self.state.page * self.page_size, 0)

    def rendered_count(self) -> int:
        return min(self.state.page * self.page_size, len(self.state.matches))

    def visible_window(self) -> List[Book]:
        return self.state.matches[: self.page_size]

    def rendered_window(self) -> List[Book]:
        return self.state.matches[: self.rendered_count()]

    def show_more(self) -> ShowMoreButton:
        remaining = self.remaining()
        return ShowMoreButton(
            label=f"{SHOW_MORE_TEXT} ({remaining})",
            remaining=remaining,
            disabled=remaining == 0,
        )

    def empty_message(self) -> bool:
        return self.state.filtered and not self.state.matches

    def initialize(self) -> List[PreviewItem]:
        self.state = CatalogState(matches=list(self.dataset.books))
        return self._render_first_window()

    def apply_filter(self, criteria: FilterCriteria) -> List[PreviewItem]:
        matches = store.apply_filter(self.dataset.books, criteria)
        self.state = CatalogState(matches=matches, page=1, filtered=True)
        logger.debug(
            "Filter %s matched %d of %d books",
            criteria.model_dump(),
            len(matches),
            len(self.dataset.books),
        )
        return self._render_first_window()

    def paginate(self) -> List[PreviewItem]:
        """Append the next window of matches; a no-op when nothing remains."""
        if self.remaining() == 0:
            logger.debug("Show more requested with nothing remaining; ignored")
            return []

        start = self.state.page * self.page_size
        window = self.state.matches[start : start + self.page_size]
        self.state.page += 1

        items = render_previews(window, self.dataset.authors)
        self.sink.append(items)
        self.sink.set_show_more(self.show_more())
        return items

    def resolve_detail(self, book_id: str) -> Optional[DetailView]:
        detail = store.resolve_detail(self.dataset, book_id)
        if detail is None:
            return None
        self.sink.show_detail(detail)
        self.sink.set_detail_open(True)
        return detail

    def close_detail(self) -> None:
        self.sink.set_detail_open(False)

    def genre_options(self) -> List[Option]:
        return store.genre_options(self.dataset)

    def author_options(self) -> List[Option]:
        return store.author_options(self.dataset)

    def _render_first_window(self) -> List[PreviewItem]:
        items = render_previews(self.visible_window(), self.dataset.authors)
        self.sink.replace(items)
        self.sink.set_empty_message(self.empty_message())
        self.sink.set_show_more(self.show_more())
        return items
