from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class KrakenModel(BaseModel):
    """Base for all Kraken response models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


def id_field():
    # Kraken v5 names identifiers "_id"
    return Field(default=None, validation_alias=AliasChoices("_id", "id"))
