class WTicketError(Exception):
    """Base class for every failure raised by the scraper."""


class AuthenticationError(WTicketError):
    """The login flow finished without a session cookie."""


class LayoutMismatchError(WTicketError):
    """A page does not contain the structure the scanner expects."""


class NetworkError(WTicketError):
    """Navigation failed before a page could be read."""


class NetworkTimeoutError(NetworkError):
    """Navigation did not finish within the configured timeout."""
