"""Data models for catalog search."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Item, MediaType


class SearchResult(BaseModel):
    """Result of a catalog search."""

    query: str = Field(..., description="Search text")
    kind: MediaType = Field(..., description="Kind of item searched for")
    success: bool = Field(..., description="Whether the search succeeded")
    items: List[Item] = Field(default_factory=list, description="Matching items")
    error: Optional[str] = Field(None, description="Error message if failed")

    @property
    def item_count(self) -> int:
        return len(self.items)
