"""Persisted list model."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .media import MediaType, RankedItem


class MediaList(BaseModel):
    """A named, ordered list of ranked items."""

    id: str = Field(..., description="List identifier")
    name: str = Field(..., description="List name")
    list_type: MediaType = Field(MediaType.MOVIE, description="Kind of items the list holds")
    items: List[RankedItem] = Field(default_factory=list, description="Items, most preferred first")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @property
    def rated_count(self) -> int:
        return sum(1 for item in self.items if item.rating is not None)
