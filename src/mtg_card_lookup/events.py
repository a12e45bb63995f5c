"""
Event system for MTG Card Lookup
Keeps the lookup pipeline free of console output; listeners decide how to report
"""

from typing import Dict, List, Callable, Any, Optional, Union
from enum import Enum
from datetime import datetime
from abc import ABC, abstractmethod


class BaseEvent(ABC):
    """Base class for all lookup events"""

    def __init__(self):
        self.timestamp = datetime.now()

    @property
    @abstractmethod
    def event_type(self) -> str:
        """Return the event type identifier"""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary format handed to listeners"""
        data = {}
        for key, value in self.__dict__.items():
            if key != 'timestamp' and not key.startswith('_'):
                data[key] = value
        return data


class LookupEventType(str, Enum):
    """Types of lookup events that can be emitted"""
    REQUEST_STARTED = "request_started"
    URL_ERROR = "url_error"
    RESPONSE_RECEIVED = "response_received"
    DATA_RECEIVED = "data_received"
    CARDS_DECODED = "cards_decoded"
    DECODE_ERROR = "decode_error"
    NO_DATA = "no_data"
    REQUEST_ERROR = "request_error"
    REQUEST_COMPLETED = "request_completed"
    ERROR_OCCURRED = "error_occurred"


# Request lifecycle events

class RequestStartedEvent(BaseEvent):
    def __init__(self, name: str):
        super().__init__()
        self.name = name

    @property
    def event_type(self) -> str:
        return LookupEventType.REQUEST_STARTED.value


class UrlErrorEvent(BaseEvent):
    def __init__(self, name: str, reason: str):
        super().__init__()
        self.name = name
        self.reason = reason

    @property
    def event_type(self) -> str:
        return LookupEventType.URL_ERROR.value


class ResponseReceivedEvent(BaseEvent):
    """status_code is None when the request produced no HTTP response"""

    def __init__(self, name: str, status_code: Optional[int]):
        super().__init__()
        self.name = name
        self.status_code = status_code

    @property
    def event_type(self) -> str:
        return LookupEventType.RESPONSE_RECEIVED.value


class DataReceivedEvent(BaseEvent):
    def __init__(self, name: str, size_bytes: int):
        super().__init__()
        self.name = name
        self.size_bytes = size_bytes

    @property
    def event_type(self) -> str:
        return LookupEventType.DATA_RECEIVED.value


class NoDataEvent(BaseEvent):
    def __init__(self, name: str):
        super().__init__()
        self.name = name

    @property
    def event_type(self) -> str:
        return LookupEventType.NO_DATA.value


class RequestCompletedEvent(BaseEvent):
    def __init__(self, name: str, card_count: Optional[int], duration: str):
        super().__init__()
        self.name = name
        self.card_count = card_count
        self.duration = duration

    @property
    def event_type(self) -> str:
        return LookupEventType.REQUEST_COMPLETED.value


# Decode events

class CardsDecodedEvent(BaseEvent):
    def __init__(self, name: str, cards: List[Any]):
        super().__init__()
        self.name = name
        self.cards = cards
        self.count = len(cards)

    @property
    def event_type(self) -> str:
        return LookupEventType.CARDS_DECODED.value


class DecodeErrorEvent(BaseEvent):
    def __init__(self, name: str, message: str):
        super().__init__()
        self.name = name
        self.message = message

    @property
    def event_type(self) -> str:
        return LookupEventType.DECODE_ERROR.value


class RequestErrorEvent(BaseEvent):
    def __init__(self, name: str, message: str):
        super().__init__()
        self.name = name
        self.message = message

    @property
    def event_type(self) -> str:
        return LookupEventType.REQUEST_ERROR.value


# Error Events

class ErrorOccurredEvent(BaseEvent):
    def __init__(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.error_type = error_type
        self.message = message
        self.context = context or {}

    @property
    def event_type(self) -> str:
        return LookupEventType.ERROR_OCCURRED.value


class LookupEventEmitter:
    """Event emitter for lookup progress and diagnostics"""

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {}

    @staticmethod
    def _key(event_type: Union[str, LookupEventType]) -> str:
        if isinstance(event_type, LookupEventType):
            return event_type.value
        return event_type

    def on(self, event_type: Union[str, LookupEventType], callback: Callable[[Dict[str, Any]], None]):
        """Register an event listener"""
        self._listeners.setdefault(self._key(event_type), []).append(callback)

    def off(self, event_type: Union[str, LookupEventType], callback: Callable):
        """Remove an event listener"""
        key = self._key(event_type)
        if key in self._listeners:
            self._listeners[key] = [
                cb for cb in self._listeners[key] if cb != callback
            ]

    def emit(self, event: BaseEvent):
        """Emit an event to all registered listeners"""
        event_data = event.to_dict()
        for callback in self._listeners.get(event.event_type, []):
            try:
                callback(event_data)
            except Exception as e:
                # Don't let listener errors break the lookup
                print(f"Event listener error: {e}")

    def clear_listeners(self, event_type: Optional[Union[str, LookupEventType]] = None):
        """Clear all listeners for a specific event type, or all listeners"""
        if event_type:
            self._listeners[self._key(event_type)] = []
        else:
            self._listeners.clear()
