from datetime import date

import pytest

from wticket.domain.errors import LayoutMismatchError
from wticket.domain.model import Ticket
from wticket.infrastructure.scan_adapter.scanner_adapter import Scanner
from tests.scanner_adapter.html_utils import HtmlUtils


@pytest.fixture
def tickets_html():
    return HtmlUtils.load("tickets.html")


@pytest.fixture
def new_tickets_html():
    return HtmlUtils.load("new_tickets.html")


def test_scan_tickets(tickets_html):
    # Given
    scanner = Scanner()

    # When
    result = scanner.scan_tickets(tickets_html)

    # Then
    expected = [
        Ticket(
            number=1042,
            search_name="ACME",
            description="Printer offline",
            last_edit="gisteren",
            age="3d",
            participants="JD, KL",
            submitter="Piet",
            created_at=date(2024, 3, 5),
            completed_at="07-03-2024",
            duration="2d",
        ),
        Ticket(
            number=1043,
            description="VPN drops every hour",
            last_edit="vandaag",
            age="1d",
            created_at=date(2024, 3, 18),
        ),
        Ticket(
            number=1047,
            description="Mailbox full",
            last_edit="vorige week",
            age="8d",
            participants="AB",
            created_at=date(2023, 12, 31),
            duration="1u",
        ),
    ]
    assert result == expected


def test_scan_tickets_leaves_empty_optional_fields_absent(tickets_html):
    # When
    result = Scanner().scan_tickets(tickets_html)

    # Then
    ticket = next(t for t in result if t.number == 1043)
    assert ticket.search_name is None
    assert ticket.participants is None
    assert ticket.submitter is None
    assert ticket.completed_at is None
    assert ticket.duration is None


def test_scan_tickets_drops_incomplete_rows_without_stopping(tickets_html):
    # When
    numbers = [t.number for t in Scanner().scan_tickets(tickets_html)]

    # Then
    assert 1044 not in numbers  # no description
    assert 1046 not in numbers  # row too short
    assert numbers[-1] == 1047


def test_scan_tickets_drops_malformed_date_and_logs_warning(tickets_html, caplog):
    # When
    with caplog.at_level("WARNING"):
        numbers = [t.number for t in Scanner().scan_tickets(tickets_html)]

    # Then
    assert 1045 not in numbers
    assert "2024/03/18" in caplog.text
    assert "wf1act" in caplog.text


def test_scan_new_tickets(new_tickets_html):
    # When
    result = Scanner().scan_new_tickets(new_tickets_html)

    # Then
    expected = [
        Ticket(
            number=2001,
            search_name="GLOBEX",
            description="New laptop",
            last_edit="vandaag",
            age="0d",
            submitter="Homer",
            created_at=date(2026, 10, 19),
        ),
        Ticket(
            number=2002,
            description="Password reset",
            last_edit="vandaag",
            age="0d",
            created_at=date(2026, 10, 18),
        ),
    ]
    assert result == expected


@pytest.mark.parametrize("scan", ["scan_tickets", "scan_new_tickets", "scan_employees"])
def test_missing_table_raises_layout_mismatch(scan):
    # Given
    html = HtmlUtils.load("no_table.html")

    # When / Then
    with pytest.raises(LayoutMismatchError, match="Table not found"):
        getattr(Scanner(), scan)(html)


def test_empty_table_body_returns_empty_list():
    # Given
    html = "<table><tbody></tbody></table>"

    # When
    result = Scanner().scan_tickets(html)

    # Then
    assert result == []


def test_scan_tickets_drops_row_with_non_numeric_ticket_number(caplog):
    # Given
    html = (
        "<table><tbody>"
        "<tr><td></td><td>T-1042</td><td></td><td>Printer offline</td><td></td>"
        "<td>vandaag</td><td>1d</td><td></td><td></td><td>18-03-2024</td></tr>"
        "<tr><td></td><td>1043</td><td></td><td>VPN drops</td><td></td>"
        "<td>vandaag</td><td>1d</td><td></td><td></td><td>18-03-2024</td></tr>"
        "</tbody></table>"
    )

    # When
    with caplog.at_level("WARNING"):
        result = Scanner().scan_tickets(html)

    # Then
    assert [t.number for t in result] == [1043]
    assert "T-1042" in caplog.text
