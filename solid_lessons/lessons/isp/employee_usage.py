"""Usage of the segregated employee role interfaces."""
from solid_lessons.lessons.isp.employee_refactored import RegularEmployee, Manager


def main() -> None:
    regular_employee = RegularEmployee()
    manager = Manager()

    regular_employee.work()
    regular_employee.eat()

    manager.work()
    manager.eat()
    manager.manage_team()
    manager.fire_employee("123")
    manager.approve_vacation("456")

    # regular_employee.manage_team() -> AttributeError: not a Manageable


if __name__ == "__main__":
    main()
