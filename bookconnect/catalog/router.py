"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /books              : current list view for the session
- POST /books/reset        : back to the unfiltered first page
- POST /search             : apply a filter (full replace of the list)
- POST /more               : append the next page ("Show more")
- POST /detail/{book_id}   : open the detail overlay for one book
- POST /detail/close       : close the detail overlay
- GET  /options/genres     : genre selector options
- GET  /options/authors    : author selector options
- GET  /theme, POST /theme : day/night theme
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from ..models import FilterCriteria
from .schemas import DetailView, ListViewOut, Option, PageOut, ThemeIn, ThemeOut
from .sessions import SESSION_COOKIE, CatalogSession, SessionStore
from .store import author_options, genre_options
from .theme import preferred_theme, theme_colors


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_session(request: Request, response: Response) -> CatalogSession:
    sessions: SessionStore = request.app.state.sessions
    session = sessions.get_or_create(request.cookies.get(SESSION_COOKIE))
    response.set_cookie(SESSION_COOKIE, session.id, httponly=True, samesite="lax")
    return session


def _list_view(session: CatalogSession) -> ListViewOut:
    controller = session.controller
    view = session.view
    return ListViewOut(
        items=list(view.items),
        empty_message=view.empty_message,
        show_more=controller.show_more(),
        page=controller.state.page,
        total=len(controller.state.matches),
    )


@router.get("/books", response_model=ListViewOut)
def list_books(session: CatalogSession = Depends(get_session)) -> ListViewOut:
    with session.lock:
        return _list_view(session)


@router.post("/books/reset", response_model=ListViewOut)
def reset_books(session: CatalogSession = Depends(get_session)) -> ListViewOut:
    with session.lock:
        session.controller.initialize()
        return _list_view(session)


@router.post("/search", response_model=ListViewOut)
def search_books(
    criteria: FilterCriteria, session: CatalogSession = Depends(get_session)
) -> ListViewOut:
    with session.lock:
        session.controller.apply_filter(criteria)
        return _list_view(session)


@router.post("/more", response_model=PageOut)
def show_more(session: CatalogSession = Depends(get_session)) -> PageOut:
    with session.lock:
        items = session.controller.paginate()
        return PageOut(
            items=items,
            show_more=session.controller.show_more(),
            page=session.controller.state.page,
        )


@router.post("/detail/close")
def close_detail(session: CatalogSession = Depends(get_session)):
    with session.lock:
        session.controller.close_detail()
    return {"status": "ok"}


@router.post("/detail/{book_id}", response_model=DetailView)
def open_detail(book_id: str, session: CatalogSession = Depends(get_session)) -> DetailView:
    with session.lock:
        detail = session.controller.resolve_detail(book_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return detail


@router.get("/options/genres", response_model=List[Option])
def list_genre_options(request: Request) -> List[Option]:
    return genre_options(request.app.state.dataset)


@router.get("/options/authors", response_model=List[Option])
def list_author_options(request: Request) -> List[Option]:
    return author_options(request.app.state.dataset)


@router.get("/theme", response_model=ThemeOut)
def get_theme(
    prefers_dark: Optional[bool] = Query(
        default=None, description="Client prefers a dark colour scheme"
    ),
    session: CatalogSession = Depends(get_session),
) -> ThemeOut:
    theme = session.theme or preferred_theme(bool(prefers_dark))
    return ThemeOut(theme=theme, colors=theme_colors(theme))


@router.post("/theme", response_model=ThemeOut)
def set_theme(req: ThemeIn, session: CatalogSession = Depends(get_session)) -> ThemeOut:
    with session.lock:
        session.theme = req.theme
    return ThemeOut(theme=req.theme, colors=theme_colors(req.theme))
