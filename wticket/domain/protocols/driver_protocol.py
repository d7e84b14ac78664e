from __future__ import annotations

from typing import Protocol

from wticket.domain.model import Session


class DriverProtocol(Protocol):
    """Browser surface used by the scraper.

    The application layer depends on this protocol only, so it does not
    import Playwright. The Playwright implementation lives in
    `wticket/infrastructure/driver_adapter/driver.py`.
    """

    def login(self, username: str, password: str) -> Session:
        """Submit the login form and return the session cookie.

        Raises AuthenticationError when no JSESSIONID cookie is present
        afterwards.
        """

    def logout(self) -> None:
        """Load the logout endpoint in a fresh page."""

    def get_html(self, path: str) -> str:
        """Load a server-relative path in a fresh page and return its HTML.

        The page is closed before returning, also when loading fails.
        """

    def stop(self) -> None:
        """Close the browser and every page it owns."""
