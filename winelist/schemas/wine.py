"""Pydantic schemas for wine catalog records."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Shown wherever an optional field is absent
PLACEHOLDER = "N/A"
DEFAULT_DESCRIPTION = "A fine wine selection."


class WineType(str, Enum):
    """Closed set of wine types, valued by the codes used on the list."""

    RED = "ROSSO"
    WHITE = "BIANCO"
    ROSE = "ROSATO"
    SPARKLING = "BOLLICINE"

    @classmethod
    def _missing_(cls, value: object) -> "WineType | None":
        # Accept lowercase codes and the English member names
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.value, member.name):
                    return member
        return None

    @property
    def display_name(self) -> str:
        return WINE_TYPE_NAMES[self]


WINE_TYPE_NAMES = {
    WineType.RED: "Red Wines",
    WineType.WHITE: "White Wines",
    WineType.ROSE: "Rosé Wines",
    WineType.SPARKLING: "Sparkling Wines",
}


def parse_wine_type(value: str | None) -> WineType | None:
    """Parse a wine type code or name, returning None if it is not recognised."""
    if not value:
        return None
    try:
        return WineType(value)
    except ValueError:
        return None


def wine_type_display_name(value: WineType | str | None) -> str:
    """Human readable name for a wine type, "Wines" when unknown."""
    wine_type = value if isinstance(value, WineType) else parse_wine_type(value)
    return wine_type.display_name if wine_type else "Wines"


class WineRecord(BaseModel):
    """A single wine on the list.

    Accepts both the keys of the published list file (``wine_number``,
    ``wine_name``, ``wine_type``, ...) and the plain field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, validation_alias=AliasChoices("id", "wine_number"))
    name: str = Field("", validation_alias=AliasChoices("name", "wine_name"))
    type: WineType = Field(..., validation_alias=AliasChoices("type", "wine_type"))
    region: str = ""
    varietals: str | None = None
    description: str | None = Field(
        None, validation_alias=AliasChoices("description", "wine_description")
    )
    vintage: str | None = Field(None, validation_alias=AliasChoices("vintage", "wine_vintage"))
    price: float | None = Field(None, validation_alias=AliasChoices("price", "wine_price"))
    alcohol: str | None = None
    aging: str | None = None

    @field_validator("id", "vintage", "alcohol", "aging", mode="before")
    @classmethod
    def stringify_numbers(cls, v: Any) -> Any:
        """Numbers in the list file are kept in their string form."""
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name", "region", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v
