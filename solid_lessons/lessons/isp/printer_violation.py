"""Violating the Interface Segregation Principle.

Problem: the fat AllInOnePrinter interface forces every class to implement
methods it doesn't need. SimplePrinter has to raise for everything it can't do.

This leads to:
- Confusing code
- Runtime errors
- Code that is hard to maintain and extend
"""
from abc import ABC, abstractmethod


class AllInOnePrinter(ABC):

    @abstractmethod
    def print(self, document: str) -> None:
        pass

    @abstractmethod
    def scan(self, document: str) -> str:
        pass

    @abstractmethod
    def fax(self, document: str, number: str) -> None:
        pass

    @abstractmethod
    def photocopy(self, document: str) -> str:
        pass


class SimplePrinter(AllInOnePrinter):

    def print(self, document: str) -> None:
        print(f"Printing: {document}")

    def scan(self, document: str) -> str:
        raise NotImplementedError("This printer can't scan!")

    def fax(self, document: str, number: str) -> None:
        raise NotImplementedError("This printer can't fax!")

    def photocopy(self, document: str) -> str:
        raise NotImplementedError("This printer can't photocopy!")


def main() -> None:
    printer = SimplePrinter()
    printer.print("Important document")
    # The interface promises scanning, the implementation can't deliver
    printer.scan("Important document")


if __name__ == "__main__":
    main()
