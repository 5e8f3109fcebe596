"""
Pydantic schema definitions for the catalog module.

These models describe what the front-end receives: rendered preview
fragments for the list, the state of the "Show more" button, the
fields of the detail overlay, selector options and theme colours.
They are copies of what the controller rendered and never reference
the controller's own state.
"""

from typing import Dict, List, Literal

from pydantic import BaseModel, Field


Theme = Literal["day", "night"]


class PreviewAttributes(BaseModel):
    """The four flat attributes a preview item is rendered from.

    ``author`` is already resolved to its display name; the preview
    performs no lookups of its own.
    """

    id: str
    title: str
    author: str
    image: str = ""


class PreviewItem(PreviewAttributes):
    """A preview attribute record together with its rendered fragment."""

    html: str = ""


class ShowMoreButton(BaseModel):
    label: str
    remaining: int = Field(ge=0)
    disabled: bool


class ListViewOut(BaseModel):
    """Full list view returned after a fresh render or a search."""

    items: List[PreviewItem]
    empty_message: bool
    show_more: ShowMoreButton
    page: int
    total: int


class PageOut(BaseModel):
    """The window appended by a "Show more" request."""

    items: List[PreviewItem]
    show_more: ShowMoreButton
    page: int


class DetailView(BaseModel):
    id: str
    image: str
    title: str
    subtitle: str
    description: str
    author: str
    year: int


class Option(BaseModel):
    id: str
    label: str


class ThemeIn(BaseModel):
    theme: Theme


class ThemeOut(BaseModel):
    theme: Theme
    colors: Dict[str, str]
