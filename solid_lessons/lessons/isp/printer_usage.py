"""Usage of the segregated printer interfaces.

Each class has only the methods it needs, with no needless exceptions.
"""
from solid_lessons.lessons.isp.printer_refactored import SimplePrinter, MultiFunctionPrinter


def main() -> None:
    simple_printer = SimplePrinter()
    multi_printer = MultiFunctionPrinter()

    simple_printer.print("Important document")

    multi_printer.print("Report")
    multi_printer.scan("Document")
    multi_printer.fax("Contract", "+380501234567")

    # simple_printer.scan("document") -> AttributeError: SimplePrinter has no scan


if __name__ == "__main__":
    main()
