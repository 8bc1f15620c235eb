"""Response envelope returned by every client."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .prompt import FrozenDict


class Generation(BaseModel):
    """One candidate output. ``text`` may be empty depending on the provider."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    info: FrozenDict = Field(default_factory=dict, validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class AiResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    generations: Tuple[Generation, ...] = ()
    provider_output: FrozenDict = Field(default_factory=dict, validate_default=True)

    @property
    def generation(self) -> Optional[Generation]:
        """First candidate, or None when the provider returned nothing."""
        return self.generations[0] if self.generations else None
