# bookconnect/models.py
from datetime import datetime
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


ANY = "any"


class Book(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
    image: str = ""
    description: str = ""
    published: datetime
    genres: Tuple[str, ...] = Field(
        ...,
        description="Identifiants de genre, dans l'ordre du jeu de données.",
    )

    @field_validator("genres")
    @classmethod
    def _genres_not_empty(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("Un livre doit avoir au moins un genre.")
        return value


class CatalogDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    books: Tuple[Book, ...] = ()
    authors: Dict[str, str] = Field(default_factory=dict)
    genres: Dict[str, str] = Field(default_factory=dict)
    page_size: int = Field(default=36, gt=0)

    @model_validator(mode="after")
    def _unique_ids(self) -> "CatalogDataset":
        seen = set()
        for book in self.books:
            if book.id in seen:
                raise ValueError(f"Identifiant de livre en double : {book.id}")
            seen.add(book.id)
        return self


class FilterCriteria(BaseModel):
    title: str = ""
    author: str = ANY
    genre: str = ANY
