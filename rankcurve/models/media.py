"""Media item models shared by the sorter and the rating engine."""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MediaType(str, Enum):
    """Kinds of items a list can hold."""

    MOVIE = "movie"
    TV = "tv"
    BOOK = "book"


ItemKey = Tuple[int, MediaType]


class Item(BaseModel):
    """Catalog item with an immutable identity."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog ID")
    type: MediaType = Field(..., description="Item kind")
    title: str = Field(..., description="Display title")
    poster_path: Optional[str] = Field(None, description="Poster or cover reference")
    release_date: Optional[str] = Field(None, description="Release date or publication year")
    overview: Optional[str] = Field(None, description="Synopsis")
    authors: Optional[List[str]] = Field(None, description="Authors (books only)")

    @property
    def key(self) -> ItemKey:
        """Identity pair; two items with the same key are the same item."""
        return (self.id, self.type)


class RankedItem(Item):
    """Item placed in a preference order, optionally rated."""

    rank: int = Field(..., description="Dense rank, N-1 for the most preferred", ge=0)
    rating: Optional[float] = Field(None, description="Rating, None while unrated")

    @classmethod
    def from_item(cls, item: Item, rank: int = 0, rating: Optional[float] = None) -> "RankedItem":
        """Wrap a plain item; ranked items keep their own rating unless one is given."""
        data = item.model_dump()
        data["rank"] = rank
        if rating is not None or "rating" not in data:
            data["rating"] = rating
        return cls(**data)

    @property
    def is_rated(self) -> bool:
        return self.rating is not None
