"""Error taxonomy for the screener."""


class ScreenerError(Exception):
    """Base class for all screener errors."""


class ServiceError(ScreenerError):
    """The call to the completion service failed (network, auth, quota, missing key)."""


class ParseError(ScreenerError):
    """The service answered, but the payload is not a JSON array of stock records."""


class FetchError(ScreenerError):
    """Single normalized error raised by the fetcher for any failed attempt."""
