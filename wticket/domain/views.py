"""Column schemas for the server-rendered listing views.

Every listing is an ``UITableIFrame.jsp`` page addressed by a query id. The
cell positions below describe where each record field lives inside a table
row, so the scanner can use one parsing routine for all views.
"""
from dataclasses import dataclass
from urllib.parse import urlencode

TABLE_PATH = "/jsp/atsc/UITableIFrame.jsp"
LOGOUT_PATH = "/login/wf/logout.jsp"


@dataclass(frozen=True)
class ListingView:
    query_id: str
    columns: dict[str, int]
    required: frozenset[str]

    def __post_init__(self):
        unknown = self.required.difference(self.columns)
        if unknown:
            raise ValueError(f"Required fields {sorted(unknown)} have no column in view {self.query_id}")


TICKET_REQUIRED = frozenset({"number", "description", "last_edit", "age", "created_at"})

TICKETS = ListingView(
    query_id="wf1act",
    columns={
        "number": 1,
        "search_name": 2,
        "description": 3,
        "last_edit": 5,
        "age": 6,
        "participants": 7,
        "submitter": 8,
        "created_at": 9,
        "completed_at": 10,
        "duration": 11,
    },
    required=TICKET_REQUIRED,
)

NEW_TICKETS = ListingView(
    query_id="wf1actnieuw",
    columns={
        "number": 1,
        "search_name": 2,
        "description": 3,
        "last_edit": 9,
        "age": 10,
        "submitter": 13,
        "created_at": 17,
    },
    required=TICKET_REQUIRED,
)

EMPLOYEES = ListingView(
    query_id="wf1medewerkers",
    columns={
        "search_name": 0,
        "name": 1,
        "tasks": 2,
    },
    required=frozenset({"search_name", "name", "tasks"}),
)


def build_view_path(view: ListingView, limit: int | None = None, skip: int | None = None) -> str:
    """Return the server-relative path of a listing view.

    ``limit`` becomes ``maxrows`` and ``skip`` becomes ``rel``; each is only
    sent when given.
    """
    params: dict[str, str | int] = {"queryid": view.query_id}
    if limit is not None:
        params["maxrows"] = limit
    if skip is not None:
        params["rel"] = skip
    return f"{TABLE_PATH}?{urlencode(params)}"
