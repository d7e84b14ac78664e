import pytest

from wticket.domain.model import Session
from wticket.domain.protocols.driver_protocol import DriverProtocol


class _FakeDriver(DriverProtocol):
    def __init__(
        self,
        *,
        html: str = "",
        session: str | None = "ABC123",
        get_html_error: Exception | None = None,
        logout_error: Exception | None = None,
    ) -> None:
        self.html = html
        self.session = session
        self.get_html_error = get_html_error
        self.logout_error = logout_error

        # recording
        self.login_calls: list[tuple[str, str]] = []
        self.paths: list[str] = []
        self.logout_calls = 0
        self.stopped = False

    # DriverProtocol
    def login(self, username: str, password: str) -> Session:
        from wticket.domain.errors import AuthenticationError

        self.login_calls.append((username, password))
        if self.session is None:
            raise AuthenticationError("JSESSIONID cookie not found")
        return Session(token=self.session)

    def logout(self) -> None:
        self.logout_calls += 1
        if self.logout_error is not None:
            raise self.logout_error

    def get_html(self, path: str) -> str:
        self.paths.append(path)
        if self.get_html_error is not None:
            raise self.get_html_error
        return self.html

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def fake_driver_factory():
    """Return a factory that constructs a configured FakeDriver.

    Usage:
        driver = fake_driver_factory(html=HtmlUtils.load("tickets.html"))
    """

    def _factory(**kwargs):
        return _FakeDriver(**kwargs)

    return _factory
