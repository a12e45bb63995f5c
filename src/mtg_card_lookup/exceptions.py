"""Errors raised by the lookup pipeline stages."""


class CardLookupError(Exception):
    """Base class for failures local to a single card lookup"""


class UrlBuildError(CardLookupError):
    """The card name could not be turned into a valid request URL"""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Cannot build URL for name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class CardDecodeError(CardLookupError):
    """The response body did not match the expected cards payload"""
