import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import (
    Error as PlaywrightError,
    Locator,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
)

from wticket.domain.config import DriverConfig
from wticket.domain.errors import AuthenticationError, NetworkError, NetworkTimeoutError
from wticket.domain.model import Session
from wticket.domain.protocols.driver_protocol import DriverProtocol
from wticket.domain.views import LOGOUT_PATH

logger = logging.getLogger(__name__)

USERNAME_SELECTOR = "#username"
PASSWORD_SELECTOR = "#password"
LOGIN_BUTTON_SELECTOR = ".atsc-button"
LOGIN_BUTTON_TEXT = "Login"
SESSION_COOKIE = "JSESSIONID"


class Driver(DriverProtocol):
    def __init__(self, playwright: Playwright, driver_config: DriverConfig):
        self.config = driver_config
        self.browser = playwright.chromium.launch(headless=self.config.headless)
        self.context = self.browser.new_context()
        self.context.set_default_timeout(self.config.timeout_ms)

    def url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.config.server_url.rstrip('/')}{path}"

    @contextmanager
    def open_page(self) -> Iterator[Page]:
        """Open a new tab and close it on every exit path."""
        try:
            page = self.context.new_page()
        except PlaywrightError as e:
            raise NetworkError(f"Could not open a browser page: {e}") from e
        try:
            yield page
        finally:
            page.close()

    @contextmanager
    def _navigation(self, url: str) -> Iterator[None]:
        """Translate Playwright navigation failures into NetworkError."""
        try:
            yield
        except PlaywrightTimeoutError as e:
            raise NetworkTimeoutError(f"Timed out loading {url}") from e
        except PlaywrightError as e:
            raise NetworkError(f"Failed to load {url}: {e}") from e

    def login(self, username: str, password: str) -> Session:
        logger.info("Logging in...")
        url = self.config.server_url

        with self.open_page() as page:
            with self._navigation(url):
                page.goto(url)
                page.wait_for_load_state("networkidle")

            username_field = page.locator(USERNAME_SELECTOR).first
            password_field = page.locator(PASSWORD_SELECTOR).first
            login_button = self._find_login_button(page)

            if username_field.count() and password_field.count() and login_button is not None:
                username_field.fill(username)
                password_field.fill(password)
                with self._navigation(url):
                    with page.expect_navigation():
                        login_button.click()
            else:
                logger.warning(f"Login form not found on {url}")

            session = self.session_cookie()

        logger.info("logged in.")
        return session

    def _find_login_button(self, page: Page) -> Locator | None:
        for button in page.locator(LOGIN_BUTTON_SELECTOR).all():
            if (button.text_content() or "").strip() == LOGIN_BUTTON_TEXT:
                return button
        return None

    def session_cookie(self) -> Session:
        for cookie in self.context.cookies():
            if cookie["name"] == SESSION_COOKIE:
                return Session(token=cookie["value"])
        raise AuthenticationError(f"{SESSION_COOKIE} cookie not found")

    def logout(self) -> None:
        url = self.url(LOGOUT_PATH)
        logger.info("Logging out...")
        with self.open_page() as page:
            with self._navigation(url):
                page.goto(url)

    def get_html(self, path: str) -> str:
        url = self.url(path)
        logger.debug(f"Navigating to: {url}")
        with self.open_page() as page:
            with self._navigation(url):
                page.goto(url)
            return page.content()

    def stop(self) -> None:
        self.browser.close()
