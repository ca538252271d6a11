"""Favorite city data model."""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteCity(BaseModel):
    """A saved city with a temperature snapshot and a free-text memo.

    Persisted as ``{"id", "name", "temp", "memo"}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    temperature: float = Field(alias="temp")
    memo: str = ""

    def to_storage(self) -> dict:
        """Return the persisted representation."""
        return self.model_dump(by_alias=True)
