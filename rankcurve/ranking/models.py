"""Ranking models."""

from pydantic import BaseModel, Field

from ..models import Item


class Comparison(BaseModel):
    """One pending "which do you prefer" question."""

    new_item: Item = Field(..., description="Item being inserted")
    existing_item: Item = Field(..., description="Item at the pivot")
    pivot: int = Field(..., description="Pivot index in the current sequence", ge=0)
    low: int = Field(..., description="Inclusive lower bound of the search window", ge=0)
    high: int = Field(..., description="Exclusive upper bound of the search window", ge=0)


class SortProgress(BaseModel):
    """Progress of a batch sort."""

    sorted_count: int = Field(..., description="Items placed so far", ge=0)
    total: int = Field(..., description="Items to place in total", ge=0)
    comparison_count: int = Field(..., description="Questions answered so far", ge=0)
    remaining: int = Field(..., description="Items still waiting in the queue", ge=0)
