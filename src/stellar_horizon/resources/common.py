from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Integers that Horizon encodes as JSON strings ("100" <-> 100)
StrInt = Annotated[int, PlainSerializer(str, return_type=str)]


class HorizonModel(BaseModel):
    """
    Base class for Horizon JSON resources.

    Fields are validated from Horizon's wire names and unknown fields are
    kept, so `to_dict()` mirrors the document the model was parsed from.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to Horizon's JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        """Serialize back to a Horizon JSON document."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class Link(HorizonModel):
    """A HAL link."""

    href: str
    templated: bool = False


Links = dict[str, Link]


class Price(HorizonModel):
    """A price as a fraction."""

    numerator: int = Field(alias="n")
    denominator: int = Field(alias="d")


class Asset(HorizonModel):
    """An asset as Horizon embeds it (`asset_type`, `asset_code`, `asset_issuer`)."""

    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None

    @property
    def is_native(self) -> bool:
        return self.asset_type == "native"

    def canonical(self) -> str:
        """Return "native" or "CODE:ISSUER"."""
        if self.is_native:
            return "native"
        return f"{self.asset_code}:{self.asset_issuer}"
