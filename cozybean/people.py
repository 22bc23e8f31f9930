"""People at the café: employees, baristas, cashiers and managers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .linked_list import LinkedList


def _out(file: Optional[TextIO]) -> TextIO:
    return file if file is not None else sys.stdout


@dataclass
class Person:
    """Someone with a name and an identifier."""

    name: str
    id: str

    def display(self, file: Optional[TextIO] = None) -> None:
        """Write the person's name and identifier."""
        print(f"Name: {self.name}, ID: {self.id}", file=_out(file))


@dataclass
class Employee(Person):
    """A person who works at the café."""

    work_id: str
    work_uniform: str

    def clock_in(self, file: Optional[TextIO] = None) -> None:
        """Announce the start of a shift."""
        print(
            f"{self.name} clocked in wearing uniform: {self.work_uniform}",
            file=_out(file),
        )


@dataclass
class Barista(Employee):
    """An employee who prepares drinks."""

    cups: int

    def make_drinks(self, file: Optional[TextIO] = None) -> None:
        print(f"{self.name} is making {self.cups} drinks.", file=_out(file))

    def brew_coffee(self, file: Optional[TextIO] = None) -> None:
        print(f"{self.name} is brewing coffee.", file=_out(file))


@dataclass
class Cashier(Employee):
    """An employee working a register."""

    reg: float

    def process_payment(self, file: Optional[TextIO] = None) -> None:
        print(
            f"{self.name} is processing a payment at register ${self.reg:g}",
            file=_out(file),
        )

    def give_receipt(self, file: Optional[TextIO] = None) -> None:
        print(f"{self.name} is giving a receipt.", file=_out(file))


@dataclass
class Manager(Employee):
    """An employee who runs a department and hires a team."""

    department: str
    team: LinkedList[Employee] = field(
        default_factory=LinkedList, init=False, repr=False, compare=False
    )

    def work_schedule(self, file: Optional[TextIO] = None) -> None:
        print(
            f"Manager {self.name} is reviewing the schedule for the "
            f"{self.department} department.",
            file=_out(file),
        )

    def hire_employee(self, employee: Employee, file: Optional[TextIO] = None) -> None:
        """Add ``employee`` to the team and announce it."""
        out = _out(file)
        self.team.add_back(employee)
        print(f"Manager {self.name} hired: ", end="", file=out)
        employee.display(out)

    def display_team(self, file: Optional[TextIO] = None) -> None:
        """Write every team member, in hiring order."""
        out = _out(file)
        print(f"\nTeam under Manager {self.name}:", file=out)
        for employee in self.team:
            employee.display(out)