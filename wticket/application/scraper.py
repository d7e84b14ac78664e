import logging
import threading

from playwright.sync_api import Playwright

from wticket.domain.config import DriverConfig
from wticket.domain.model import Session, Ticket, EmployeeOverview
from wticket.domain.protocols.driver_protocol import DriverProtocol
from wticket.domain.protocols.scanner_protocol import ScannerProtocol
from wticket.domain.views import TICKETS, NEW_TICKETS, EMPLOYEES, build_view_path

logger = logging.getLogger(__name__)


class WTicketScraper:
    """Client for the WTicket listing views.

    Calls are serialized: one navigation is in flight per client at a time,
    since all of them share a single browser.
    """

    def __init__(self, driver: DriverProtocol, scanner: ScannerProtocol) -> None:
        self.driver = driver
        self.scanner = scanner
        self._lock = threading.RLock()

    def __enter__(self) -> "WTicketScraper":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def login(self, username: str, password: str) -> Session:
        with self._lock:
            return self.driver.login(username, password)

    def logout(self) -> None:
        with self._lock:
            self.driver.logout()

    def close(self) -> None:
        """Log out, then shut the browser down even if logging out failed."""
        with self._lock:
            try:
                self.logout()
            finally:
                self.driver.stop()
                logger.info("Browser closed")

    def list_tickets(self, limit: int | None = None, skip: int | None = None) -> list[Ticket]:
        with self._lock:
            html = self.driver.get_html(build_view_path(TICKETS, limit=limit, skip=skip))
            tickets = self.scanner.scan_tickets(html)
        logger.debug(f"Listed {len(tickets)} tickets")
        return tickets

    def list_new_tickets(self) -> list[Ticket]:
        with self._lock:
            html = self.driver.get_html(build_view_path(NEW_TICKETS))
            tickets = self.scanner.scan_new_tickets(html)
        logger.debug(f"Listed {len(tickets)} new tickets")
        return tickets

    def list_employees(self) -> EmployeeOverview:
        with self._lock:
            html = self.driver.get_html(build_view_path(EMPLOYEES))
            overview = self.scanner.scan_employees(html)
        logger.debug(f"Listed {len(overview.employees)} employees, {overview.total_tasks} tasks in total")
        return overview


def create_wticket_scraper(playwright: Playwright, driver_config: DriverConfig) -> WTicketScraper:
    """Launch a browser and return a scraper bound to it."""
    from wticket.infrastructure.driver_adapter.driver import Driver
    from wticket.infrastructure.scan_adapter.scanner_adapter import Scanner

    return WTicketScraper(driver=Driver(playwright=playwright, driver_config=driver_config), scanner=Scanner())
