"""
Pydantic models for Polymarket data.

Gamma payloads are loosely shaped: every field is optional and several
come either as native JSON or as JSON-encoded strings. The models below
normalise that once so formatting code reads plain attributes.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .utils import safe_float, safe_json


class MarketToken(BaseModel):
    """One outcome token with its current price."""
    model_config = ConfigDict(extra="allow")

    outcome: str = ""
    price: float = 0.0

    @field_validator("outcome", mode="before")
    @classmethod
    def _outcome_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, v: Any) -> float:
        return safe_float(v)


class Market(BaseModel):
    """A Gamma market record, with defaults for everything that may be missing."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Union[str, int, None] = None
    condition_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("condition_id", "conditionId")
    )
    question: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    closed: bool = False
    end_date_iso: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("end_date_iso", "endDateIso")
    )
    volume: float = 0.0
    liquidity: float = 0.0
    # None means the field was absent; an empty list or mapping still counts as present
    outcomes: Optional[list[str]] = None
    outcomeprices: Optional[dict[str, float]] = None
    outcome_price_list: list[Any] = Field(
        default_factory=list, validation_alias="outcomePrices"
    )
    tokens: Optional[list[MarketToken]] = None

    @field_validator("closed", mode="before")
    @classmethod
    def _closed(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("volume", "liquidity", mode="before")
    @classmethod
    def _amount(cls, v: Any) -> float:
        return safe_float(v)

    @field_validator("outcomes", mode="before")
    @classmethod
    def _outcomes(cls, v: Any) -> Optional[list[str]]:
        if v is None:
            return None
        return [str(o) for o in safe_json(v)]

    @field_validator("outcome_price_list", mode="before")
    @classmethod
    def _outcome_price_list(cls, v: Any) -> list:
        return safe_json(v)

    @field_validator("outcomeprices", mode="before")
    @classmethod
    def _outcomeprices(cls, v: Any) -> Optional[dict[str, float]]:
        if v is None:
            return None
        if not isinstance(v, dict):
            return {}
        return {str(k): safe_float(p) for k, p in v.items()}

    @field_validator("tokens", mode="before")
    @classmethod
    def _tokens(cls, v: Any) -> Optional[list]:
        if isinstance(v, str):
            return safe_json(v)
        return v if isinstance(v, list) else None

    @model_validator(mode="after")
    def _zip_outcome_prices(self) -> "Market":
        # Gamma sends prices as a list aligned with ``outcomes``
        if self.outcomeprices is None and self.outcome_price_list and self.outcomes:
            self.outcomeprices = {
                outcome: safe_float(price)
                for outcome, price in zip(self.outcomes, self.outcome_price_list)
            }
        return self

    def display_title(self, default: str) -> str:
        return self.question or self.title or default

    @property
    def display_id(self) -> str:
        if self.condition_id:
            return self.condition_id
        if self.id not in (None, ""):
            return str(self.id)
        return "N/A"

    @property
    def status(self) -> str:
        return "Closed" if self.closed else "Open"
