"""Correct implementation of the Interface Segregation Principle for employees.

Solution: the Worker interface is split into three role interfaces.

Benefits:
- A regular employee has only the methods it needs
- A manager combines several roles
- No needless exceptions
"""
from abc import ABC, abstractmethod


class Workable(ABC):

    @abstractmethod
    def work(self) -> None:
        pass


class Eatable(ABC):

    @abstractmethod
    def eat(self) -> None:
        pass


class Manageable(ABC):

    @abstractmethod
    def manage_team(self) -> None:
        pass

    @abstractmethod
    def fire_employee(self, employee_id: str) -> None:
        pass

    @abstractmethod
    def approve_vacation(self, employee_id: str) -> None:
        pass


class RegularEmployee(Workable, Eatable):

    def work(self) -> None:
        print("Doing my job")

    def eat(self) -> None:
        print("Going to lunch")


class Manager(Workable, Eatable, Manageable):

    def work(self) -> None:
        print("Planning the team's work")

    def eat(self) -> None:
        print("Going to lunch")

    def manage_team(self) -> None:
        print("Managing the team")

    def fire_employee(self, employee_id: str) -> None:
        print(f"Firing employee {employee_id}")

    def approve_vacation(self, employee_id: str) -> None:
        print(f"Approving vacation for {employee_id}")
