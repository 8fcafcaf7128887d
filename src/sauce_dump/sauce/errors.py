"""Errors raised while decoding SAUCE records."""


class SauceError(Exception):
    """Base class for SAUCE decoding failures."""


class InputTooShortError(SauceError):
    """The input is smaller than a trailer plus a one byte body."""

    def __init__(self, size: int, minimum: int):
        super().__init__(f"file too short ({size} bytes, need at least {minimum})")
        self.size = size
        self.minimum = minimum


class ShortReadError(SauceError):
    """Fewer trailer bytes came back than the reported size promised."""

    def __init__(self, expected: int, received: int):
        super().__init__(f"short read ({received} of {expected} bytes)")
        self.expected = expected
        self.received = received


class SauceIOError(SauceError):
    """Open, seek or read failure from the underlying source."""
