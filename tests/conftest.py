"""Shared pytest fixtures for rankcurve tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest
import yaml

from rankcurve.models import Item, MediaType, RankedItem, rerank

# ============================================================================
# Item Fixtures
# ============================================================================


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Factory for catalog items."""

    def _make(item_id: int, title: Optional[str] = None, kind: MediaType = MediaType.MOVIE) -> Item:
        return Item(id=item_id, type=kind, title=title or f"Item {item_id}")

    return _make


@pytest.fixture
def make_ranked(make_item: Callable[..., Item]) -> Callable[..., list[RankedItem]]:
    """Factory for a best-first sequence with the given ratings (None = unrated)."""

    def _make(ratings: list[Optional[float]], first_id: int = 1) -> list[RankedItem]:
        items = rerank([make_item(first_id + offset) for offset in range(len(ratings))])
        return [item.model_copy(update={"rating": rating}) for item, rating in zip(items, ratings)]

    return _make


@pytest.fixture
def five_items(make_item: Callable[..., Item]) -> list[Item]:
    """Five distinct movies."""
    titles = ["Alien", "Brazil", "Chinatown", "Dune", "Eraserhead"]
    return [make_item(index + 1, title) for index, title in enumerate(titles)]


@pytest.fixture
def sorted_four(make_ranked: Callable[..., list[RankedItem]]) -> list[RankedItem]:
    """Four unrated items ranked 3, 2, 1, 0."""
    return make_ranked([None, None, None, None])


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Write a file-backed config into a temporary workspace."""
    path = tmp_path / "config" / "config.yaml"
    path.parent.mkdir(parents=True)
    data = {
        "workspace_root": str(tmp_path / "workspace"),
        "storage": {"backend": "file"},
        "search": {"tmdb_api_key_env": "RANKCURVE_TEST_TMDB_KEY"},
    }
    path.write_text(yaml.safe_dump(data))
    return path
