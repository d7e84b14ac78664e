from typing import Protocol

from wticket.domain.model import Ticket, EmployeeOverview


class ScannerProtocol(Protocol):
    """Parsing operations over listing HTML pages."""

    def scan_tickets(self, html: str) -> list[Ticket]:
        """Parse the general ticket listing (`wf1act`)."""

    def scan_new_tickets(self, html: str) -> list[Ticket]:
        """Parse the new ticket listing (`wf1actnieuw`)."""

    def scan_employees(self, html: str) -> EmployeeOverview:
        """Parse the employee listing (`wf1medewerkers`) and its total task count."""
