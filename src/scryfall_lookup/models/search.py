from typing import Any, Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from .card import Card


class SearchResult(BaseModel):
    """One page of a Scryfall card search"""
    model_config = ConfigDict(frozen=True)

    data: Tuple[Card, ...]
    total_cards: int = Field(ge=0, description="Total number of cards found (must be >= 0)")
    has_more: bool
    next_page: Optional[str] = None

    @model_validator(mode="after")
    def _check_cursor(self) -> "SearchResult":
        if self.has_more != (self.next_page is not None):
            raise ValueError("has_more must be true exactly when next_page is present")
        return self

    @classmethod
    def from_scryfall(cls, data: Dict[str, Any]) -> "SearchResult":
        """Create SearchResult from a Scryfall list payload, ignoring unknown keys"""
        return cls.model_validate({
            "data": data.get("data"),
            "total_cards": data.get("total_cards"),
            "has_more": data.get("has_more"),
            "next_page": data.get("next_page"),
        })
