"""Correct implementation of the Interface Segregation Principle.

Solution: several small interfaces instead of one big one, each covering
exactly one capability.

Benefits:
- Each class implements only the methods it needs
- No needless exceptions
- Easier to test and maintain
- Capabilities combine freely
"""
from abc import ABC, abstractmethod


class Printable(ABC):

    @abstractmethod
    def print(self, document: str) -> None:
        pass


class Scannable(ABC):

    @abstractmethod
    def scan(self, document: str) -> str:
        pass


class Faxable(ABC):

    @abstractmethod
    def fax(self, document: str, number: str) -> None:
        pass


class Photocopiable(ABC):

    @abstractmethod
    def photocopy(self, document: str) -> str:
        pass


class SimplePrinter(Printable):

    def print(self, document: str) -> None:
        print(f"Printing: {document}")


class MultiFunctionPrinter(Printable, Scannable, Faxable):

    def print(self, document: str) -> None:
        print(f"Printing: {document}")

    def scan(self, document: str) -> str:
        print(f"Scanning: {document}")
        return f"Scanned data from {document}"

    def fax(self, document: str, number: str) -> None:
        print(f"Faxing {document} to {number}")
