"""Configuration models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("rankcurve", description="Database name")
    user: str = Field("rankcurve_user", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class RatingConfig(BaseModel):
    """Bell curve parameters and rating bounds."""

    mean: float = Field(3.0, description="Curve mean", ge=1.0, le=5.0)
    std_dev: float = Field(1.0, description="Curve standard deviation", ge=0.5, le=2.0)
    min_rating: float = Field(0.5, description="Lowest rating", ge=0.0)
    max_rating: float = Field(5.0, description="Highest rating", le=10.0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "RatingConfig":
        """Validate that the rating range is not empty."""
        if self.min_rating >= self.max_rating:
            raise ValueError(
                f"min_rating must be below max_rating, got {self.min_rating} >= {self.max_rating}"
            )
        return self


class AdjustmentConfig(BaseModel):
    """Direct manipulation tuning."""

    drag_sensitivity: float = Field(0.5, description="Fraction of pointer movement applied", gt=0.0, lt=1.0)
    dead_zone_px: float = Field(2.0, description="Pointer jitter ignored, in pixels", ge=0.0)
    card_width_px: float = Field(160.0, description="Nominal card width plus margin", gt=0.0)
    curve_width_px: float = Field(800.0, description="Width of the rating axis", gt=0.0)
    zoom_padding: float = Field(0.1, description="Padding around the data when zoomed", ge=0.0, le=1.0)
    zoom_threshold: float = Field(0.7, description="Zoom only below this share of the full range", gt=0.0, le=1.0)


class SearchConfig(BaseModel):
    """Catalog search configuration."""

    tmdb_api_key_env: Optional[str] = Field("TMDB_API_KEY", description="Environment variable for the TMDB key")
    tmdb_api_key: Optional[str] = Field(None, description="TMDB API key (prefer tmdb_api_key_env)")
    tmdb_base_url: str = Field("https://api.themoviedb.org/3", description="TMDB API base URL")
    openlibrary_base_url: str = Field("https://openlibrary.org", description="Open Library base URL")
    timeout: float = Field(10.0, description="HTTP timeout in seconds", gt=0.0)
    book_limit: int = Field(20, description="Max book results", ge=1, le=100)


class StorageConfig(BaseModel):
    """List storage configuration."""

    backend: Literal["file", "postgres"] = Field("file", description="Where lists are stored")
    lists_file: str = Field("lists.yaml", description="File name under the workspace (file backend)")


class ConfigModel(BaseModel):
    """Main configuration model."""

    workspace_root: str = Field("~/RankCurve", description="Root directory for stored lists")
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    rating: RatingConfig = Field(default_factory=RatingConfig)
    adjustment: AdjustmentConfig = Field(default_factory=AdjustmentConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
