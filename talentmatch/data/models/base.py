"""
Base model classes for TalentMatch data models.

Provides common configuration shared across all models.
"""

from pydantic import BaseModel, ConfigDict, Field


class EmbeddedModel(BaseModel):
    """
    Base model for nested records and results.

    Records are frozen: the matching core builds new results and never
    mutates its inputs.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )


class Coordinates(EmbeddedModel):
    """A latitude/longitude pair in degrees."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def as_tuple(self) -> tuple[float, float]:
        """Return the point as a (lat, lng) tuple."""
        return (self.lat, self.lng)
