"""Scryfall lookup client public API.

Keep imports lightweight to avoid side effects when importing submodules,
e.g., scryfall_lookup.models.card.
"""

from typing import TYPE_CHECKING

__all__ = ["ScryfallAPI", "ServiceError", "Card", "SearchResult"]

if TYPE_CHECKING:
	# For type checkers only; avoids runtime side effects
	from .tools.scryfall_api import ScryfallAPI as ScryfallAPI
	from .errors import ServiceError as ServiceError
	from .models.card import Card as Card
	from .models.search import SearchResult as SearchResult


def __getattr__(name: str):
	if name == "ScryfallAPI":
		# Lazy import so config and dotenv load only when the client is used
		from .tools.scryfall_api import ScryfallAPI
		return ScryfallAPI
	if name == "ServiceError":
		from .errors import ServiceError
		return ServiceError
	if name == "Card":
		from .models.card import Card
		return Card
	if name == "SearchResult":
		from .models.search import SearchResult
		return SearchResult
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
