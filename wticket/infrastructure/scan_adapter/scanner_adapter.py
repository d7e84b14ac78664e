"""Scanner turning listing HTML into domain records.

The listing pages are plain server-rendered tables. All views are parsed by
`scan_rows`, driven by the column schema of the view in
`wticket.domain.views`.
"""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Callable

from bs4 import BeautifulSoup, Tag

from wticket.domain.errors import LayoutMismatchError
from wticket.domain.model import Ticket, Employee, EmployeeOverview
from wticket.domain.protocols.scanner_protocol import ScannerProtocol
from wticket.domain.views import ListingView, TICKETS, NEW_TICKETS, EMPLOYEES

logger = logging.getLogger(__name__)

HTML_PARSER = 'html.parser'
TOTAL_TASKS_SELECTOR = '#sc3'


class MalformedCellError(ValueError):
    """A cell holds text that cannot be coerced into its field type."""


_NUMBER_PATTERN = re.compile(r'-?\d{1,3}(?:\.\d{3})+|-?\d+')


def parse_number(text: str) -> int:
    """Parse an integer, allowing a leading sign and ``.`` thousands separators."""
    cleaned_text = text.strip().replace('−', '-')
    if not _NUMBER_PATTERN.fullmatch(cleaned_text):
        raise MalformedCellError(f"text {text!r} is not a valid number")
    return int(cleaned_text.replace('.', ''))


def parse_date(text: str) -> date:
    """Parse a ``DD-MM-YYYY`` string."""
    parts = text.strip().split('-')
    if len(parts) != 3:
        raise MalformedCellError(f"date {text!r} is not in DD-MM-YYYY format")
    try:
        day, month, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError as e:
        raise MalformedCellError(f"date {text!r} is not a valid calendar date") from e


_FIELD_PARSERS: dict[str, Callable[[str], Any]] = {
    "number": parse_number,
    "tasks": parse_number,
    "created_at": parse_date,
}


def _cell_text(cells: list[Tag], index: int) -> str | None:
    """Return stripped cell text, or None for a missing or empty cell."""
    if index >= len(cells):
        return None
    text = cells[index].get_text().strip()
    return text or None


def _find_table_body(soup: BeautifulSoup, view: ListingView) -> Tag:
    tbody = soup.find('tbody')
    if tbody is None:
        raise LayoutMismatchError(f"Table not found in listing {view.query_id}")
    return tbody


def _scan_row(row: Tag, view: ListingView) -> dict[str, Any] | None:
    cells = row.find_all('td')
    raw = {name: _cell_text(cells, index) for name, index in view.columns.items()}

    missing = [name for name in view.required if raw[name] is None]
    if missing:
        logger.debug(f"Skipping row in {view.query_id}, missing {sorted(missing)}")
        return None

    fields: dict[str, Any] = {}
    for name, text in raw.items():
        if text is None:
            continue
        parser = _FIELD_PARSERS.get(name)
        fields[name] = parser(text) if parser else text
    return fields


def scan_rows(html: str, view: ListingView) -> list[dict[str, Any]]:
    """Return the complete rows of a listing as field dictionaries.

    Absent optional fields are left out of the dictionary. Rows missing a
    required field, or holding a value that cannot be parsed, are dropped.
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    tbody = _find_table_body(soup, view)

    records = []
    for row in tbody.find_all('tr'):
        try:
            fields = _scan_row(row, view)
        except MalformedCellError as e:
            logger.warning(f"Dropping malformed row in {view.query_id}: {e}")
            continue
        if fields is not None:
            records.append(fields)
    return records


class Scanner(ScannerProtocol):
    """BeautifulSoup implementation of ScannerProtocol."""

    def scan_tickets(self, html: str) -> list[Ticket]:
        return [Ticket(**fields) for fields in scan_rows(html, TICKETS)]

    def scan_new_tickets(self, html: str) -> list[Ticket]:
        return [Ticket(**fields) for fields in scan_rows(html, NEW_TICKETS)]

    def scan_employees(self, html: str) -> EmployeeOverview:
        employees = [Employee(**fields) for fields in scan_rows(html, EMPLOYEES)]
        return EmployeeOverview(total_tasks=self.scan_total_tasks(html), employees=employees)

    def scan_total_tasks(self, html: str) -> int:
        soup = BeautifulSoup(html, HTML_PARSER)
        element = soup.select_one(TOTAL_TASKS_SELECTOR)
        if element is None:
            raise LayoutMismatchError(f"Total task count {TOTAL_TASKS_SELECTOR} not found")
        try:
            return parse_number(element.get_text())
        except MalformedCellError as e:
            raise LayoutMismatchError(f"Total task count is not a number: {element.get_text()!r}") from e
