"""MTG Card Lookup package public API.

Keep imports lightweight to avoid side effects when importing submodules,
e.g., mtg_card_lookup.tools.cards_api.
"""

from typing import TYPE_CHECKING

__all__ = ["CardLookupService"]

if TYPE_CHECKING:
	# For type checkers only; avoids runtime side effects
	from .orchestrator import CardLookupService as CardLookupService


def __getattr__(name: str):
	if name == "CardLookupService":
		# Lazy import so config and .env loading only happen on use
		from .orchestrator import CardLookupService
		return CardLookupService
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
