from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Session:
    """Authentication token read from the JSESSIONID cookie."""
    token: str


@dataclass
class Ticket:
    number: int
    description: str
    last_edit: str
    age: str
    created_at: date
    search_name: str | None = None
    participants: str | None = None
    submitter: str | None = None
    completed_at: str | None = None
    duration: str | None = None


@dataclass
class Employee:
    search_name: str
    name: str
    tasks: int


@dataclass
class EmployeeOverview:
    total_tasks: int
    employees: list[Employee] = field(default_factory=list)
