"""Domain models (Pydantic v2).

- Describe *what* the upstream catalog returns, not *how* it is fetched.
- `extra="ignore"` everywhere: fields the upstream adds later are dropped
  instead of breaking decoding.

Upstream JSON uses camelCase for pagination (`currentPage`) and `combat_style`
for a character's styles; aliases map those onto the Python names.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Pagination(BaseModel):
    """Current/total page counters of a paged upstream resource."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    current_page: int = Field(
        ...,
        ge=1,
        alias="currentPage",
        description="Number of the page this envelope holds (1-based).",
    )
    total_pages: int = Field(
        ...,
        alias="totalPages",
        description="Total number of pages of the resource; 0 or less means a single page.",
    )

    @property
    def has_next(self) -> bool:
        return self.current_page + 1 <= self.total_pages

    @property
    def next_page(self) -> int:
        if not self.has_next:
            raise ValueError("No next page available")
        return self.current_page + 1


class CombatStyle(BaseModel):
    """A combat style (Sun Breathing, Water Breathing...)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str | None = None
    description: str | None = None


class Affiliation(BaseModel):
    """The group a character belongs to (Demon Slayer Corps, Hashira...)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = None
    description: str | None = None


class CharacterSummary(BaseModel):
    """A character as listed by the paged characters endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str | None = None
    gender: str | None = None
    race: str | None = None
    description: str | None = None
    img: str | None = Field(default=None, description="URL of the character image.")


class Character(CharacterSummary):
    """A character as returned by the single-entity lookup."""

    affiliation: Affiliation | None = None
    combat_styles: list[CombatStyle] = Field(
        default_factory=list,
        alias="combat_style",
        description="Combat styles the character uses.",
    )

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @field_validator("combat_styles", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value


ItemT = TypeVar("ItemT", bound=BaseModel)


class PageEnvelope(BaseModel, Generic[ItemT]):
    """One upstream page: a slice of items plus pagination metadata."""

    model_config = ConfigDict(extra="ignore")

    pagination: Pagination | None = None
    content: list[ItemT] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class CharacterPage(PageEnvelope[CharacterSummary]):
    pass


class CombatStylePage(PageEnvelope[CombatStyle]):
    pass


class CharacterLookup(BaseModel):
    """List-wrapped envelope of the single-character lookup (no pagination)."""

    model_config = ConfigDict(extra="ignore")

    content: list[Character] = Field(default_factory=list)

    @field_validator("content", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value
