from dataclasses import dataclass

DEFAULT_SERVER_URL = "https://wticket-pcrolin.multitrader.nl"


@dataclass(frozen=True)
class DriverConfig:
    """Configuration for the browser driver."""
    server_url: str = DEFAULT_SERVER_URL
    headless: bool = True
    timeout_ms: int = 30000


@dataclass(frozen=True)
class Credentials:
    """Login credentials for the ticketing application."""
    user_login: str
    user_password: str

    def __repr__(self) -> str:
        return f"Credentials(user_login={self.user_login!r}, user_password='***')"


@dataclass(frozen=True)
class Config:
    """Main configuration containing log level and nested config objects."""
    log_level: str
    driver_config: DriverConfig
    credentials: Credentials
