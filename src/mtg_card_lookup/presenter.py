"""
Console presentation for card lookups.

Card blocks and diagnostics are printed through a rich Console with markup,
emoji and highlighting turned off, since card text routinely contains
brackets and braces (``[1]``, ``{U}``) that must be printed verbatim.
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.filesize import decimal

from .events import LookupEventEmitter, LookupEventType
from .models.card import Card

ITEM_PREFIX = "\n    - "


def make_console(**kwargs) -> Console:
    """Console configured for plain text output"""
    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True, **kwargs)


def format_card(index: int, card: Card) -> str:
    """Render one card as a text block; index is 1-based"""
    lines = [
        f'[{index}] "{card.name}"',
        f"ID : {card.id}",
        f"TYPE : {card.type}",
        f"ARTIST : {card.artist}",
        f"SET NAME : {card.set_name}",
        f"RARITY : {card.rarity}",
        f"MANA COST : {card.mana_cost}",
    ]
    if card.flavor is not None:
        flavor = card.flavor.replace("\n", " ")
        lines.append(f"FLAVOR : {flavor}")
    return "".join(ITEM_PREFIX + line for line in lines)


class CardPresenter:
    """Writes card summaries and lookup diagnostics to the console"""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or make_console()
        self.verbose = verbose

    def present_cards(self, cards: List[Card]) -> None:
        if not cards:
            self.console.print("  ► CARDS NOT FOUNDED")
            return

        self.console.print(f"\n    ▼ FOUNDED {len(cards)} CARDS WITH EXACT NAME")
        for index, card in enumerate(cards, 1):
            self.console.print(format_card(index, card))

    def attach(self, events: LookupEventEmitter) -> None:
        """Register diagnostic handlers on an event emitter"""

        def on_request_started(data: Dict[str, Any]):
            self.console.print(f'\n▼ REQUEST FOR NAME "{data["name"]}"')

        def on_url_error(data: Dict[str, Any]):
            self.console.print(f'  ► URL ERROR FOR NAME "{data["name"]}"')

        def on_response_received(data: Dict[str, Any]):
            if data["status_code"] is None:
                self.console.print("  ► NO RESPONSE")
            else:
                self.console.print(f"  ► RESPONSE CODE: {data['status_code']}")

        def on_data_received(data: Dict[str, Any]):
            self.console.print(f"  ► RECEIVED DATA: {decimal(data['size_bytes'])}")

        def on_cards_decoded(data: Dict[str, Any]):
            self.present_cards(data["cards"])

        def on_decode_error(data: Dict[str, Any]):
            self.console.print(f"  ► DECODING ERROR: {data['message']}")

        def on_no_data(data: Dict[str, Any]):
            self.console.print("  ► NO DATA")

        def on_request_error(data: Dict[str, Any]):
            self.console.print(f"  ► REQUEST ERROR: {data['message']}")

        def on_request_completed(data: Dict[str, Any]):
            self.console.print(f"  ► COMPLETED IN {data['duration']}")

        events.on(LookupEventType.REQUEST_STARTED, on_request_started)
        events.on(LookupEventType.URL_ERROR, on_url_error)
        events.on(LookupEventType.RESPONSE_RECEIVED, on_response_received)
        events.on(LookupEventType.DATA_RECEIVED, on_data_received)
        events.on(LookupEventType.CARDS_DECODED, on_cards_decoded)
        events.on(LookupEventType.DECODE_ERROR, on_decode_error)
        events.on(LookupEventType.NO_DATA, on_no_data)
        events.on(LookupEventType.REQUEST_ERROR, on_request_error)
        if self.verbose:
            events.on(LookupEventType.REQUEST_COMPLETED, on_request_completed)
