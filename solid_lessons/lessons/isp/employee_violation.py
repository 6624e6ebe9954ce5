"""Violating the Interface Segregation Principle in employee management.

Problem: the Worker interface mixes different roles. A regular employee is
forced to implement manager methods it never needs - like giving a cashier
access to the company's bank accounts.
"""
from abc import ABC, abstractmethod


class Worker(ABC):

    @abstractmethod
    def work(self) -> None:
        pass

    @abstractmethod
    def eat(self) -> None:
        pass

    @abstractmethod
    def manage_team(self) -> None:
        pass

    @abstractmethod
    def fire_employee(self, employee_id: str) -> None:
        pass

    @abstractmethod
    def approve_vacation(self, employee_id: str) -> None:
        pass


class RegularEmployee(Worker):

    def work(self) -> None:
        print("Doing my job")

    def eat(self) -> None:
        print("Going to lunch")

    def manage_team(self) -> None:
        raise NotImplementedError("I can't manage the team!")

    def fire_employee(self, employee_id: str) -> None:
        raise NotImplementedError("I can't fire employees!")

    def approve_vacation(self, employee_id: str) -> None:
        raise NotImplementedError("I can't approve vacations!")


def main() -> None:
    employee = RegularEmployee()
    employee.work()
    employee.eat()
    employee.manage_team()


if __name__ == "__main__":
    main()
