import asyncio
import threading
import time
from typing import Iterable, List, Optional

from .tools.cards_api import CardsAPI
from .models.card import Card, decode_cards
from .exceptions import UrlBuildError, CardDecodeError
from .presenter import CardPresenter
from .events import (
    LookupEventEmitter,
    RequestStartedEvent, UrlErrorEvent, ResponseReceivedEvent,
    DataReceivedEvent, CardsDecodedEvent, DecodeErrorEvent,
    NoDataEvent, RequestErrorEvent, RequestCompletedEvent,
    ErrorOccurredEvent
)


def format_time_elapsed(start_time: float) -> str:
    """Format elapsed time in a human-readable way"""
    elapsed = time.time() - start_time
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    elif elapsed < 60:
        return f"{elapsed:.1f}s"
    else:
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        return f"{minutes}m {seconds:.0f}s"


class CardLookupService:
    """Drives URL building, fetching, decoding and presentation for card names"""

    def __init__(
        self,
        cards_api: Optional[CardsAPI] = None,
        presenter: Optional[CardPresenter] = None,
        events: Optional[LookupEventEmitter] = None
    ):
        self.events = events or LookupEventEmitter()
        self.cards_api = cards_api or CardsAPI()
        self.presenter = presenter or CardPresenter()
        self.presenter.attach(self.events)
        # Held for a whole lookup so requests never overlap, even across threads
        self._schedule = threading.Lock()

    def fetch_cards(self, name: str) -> Optional[List[Card]]:
        """
        Look up cards with exactly this name and report the outcome

        Never raises; every failure is reported through events.

        Returns:
            The decoded cards, or None if any stage failed
        """
        with self._schedule:
            start_time = time.time()
            cards = self._lookup(name)
            self.events.emit(RequestCompletedEvent(
                name,
                len(cards) if cards is not None else None,
                format_time_elapsed(start_time)
            ))
            return cards

    def _lookup(self, name: str) -> Optional[List[Card]]:
        self.events.emit(RequestStartedEvent(name))

        # 1. Build URL
        try:
            url = self.cards_api.build_url(name)
        except UrlBuildError as e:
            self.events.emit(UrlErrorEvent(name, e.reason))
            self.events.emit(ErrorOccurredEvent("url_error", str(e), {"name": name}))
            return None

        # 2. Fetch
        result = self.cards_api.fetch(url)
        self.events.emit(ResponseReceivedEvent(name, result.status_code))

        # 3. Decode and present
        cards = None
        if result.body is not None:
            cards = self._decode_step(name, result.body)
        else:
            self.events.emit(NoDataEvent(name))

        # Transport errors are reported whether or not a body arrived
        if result.error:
            self.events.emit(RequestErrorEvent(name, result.error))
            self.events.emit(ErrorOccurredEvent("request_error", result.error, {"name": name, "url": url}))

        return cards

    def _decode_step(self, name: str, body: bytes) -> Optional[List[Card]]:
        """Decode a response body and hand the cards to listeners"""
        self.events.emit(DataReceivedEvent(name, len(body)))
        try:
            cards = decode_cards(body)
        except CardDecodeError as e:
            self.events.emit(DecodeErrorEvent(name, str(e)))
            self.events.emit(ErrorOccurredEvent("decode_error", str(e), {"name": name}))
            return None

        self.events.emit(CardsDecodedEvent(name, cards))
        return cards

    def run(self, names: Iterable[str]) -> None:
        """Look up each name in order, one request at a time"""
        for name in names:
            self.fetch_cards(name)

    async def run_async(self, names: Iterable[str]) -> None:
        """
        Look up each name in order without blocking the event loop

        Each lookup runs in a worker thread and is awaited before the next starts.
        """
        for name in names:
            await asyncio.to_thread(self.fetch_cards, name)
