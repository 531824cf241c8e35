"""VLAN models for board grouping."""

from pydantic import Field, field_validator

from .base import CamelModel

COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class Vlan(CamelModel):
    """User-defined VLAN. Items reference it by id."""

    id: int = Field(ge=1, le=4094)
    name: str = Field(min_length=1, max_length=32)
    color: str = Field(pattern=COLOR_PATTERN)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value

    @field_validator("color")
    @classmethod
    def lower_color(cls, value: str) -> str:
        return value.lower()


class VlanColorUpdate(CamelModel):
    color: str = Field(pattern=COLOR_PATTERN)

    @field_validator("color")
    @classmethod
    def lower_color(cls, value: str) -> str:
        return value.lower()
