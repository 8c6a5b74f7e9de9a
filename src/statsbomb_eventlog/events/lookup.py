"""Controlled-vocabulary references used throughout the StatsBomb feed."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LookupValue(BaseModel):
    """An ``{"id": ..., "name": ...}`` pair naming a team, player, outcome, etc.

    The identifier is trusted as delivered by the feed; it is not checked
    against any registry.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, strict=True, description="Identifier within the vocabulary")
    name: str = Field(..., strict=True, description="Display name of the vocabulary term")

    def __str__(self) -> str:
        return self.name


__all__ = ["LookupValue"]
