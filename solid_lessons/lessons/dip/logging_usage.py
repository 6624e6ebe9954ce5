"""Usage of the refactored logging system.

Different environments get different loggers without changing UserService.
"""
from solid_lessons.lessons.dip.logging_refactored import (
    ConsoleLogger,
    FileLogger,
    RemoteLogger,
    StdlibLogger,
    UserService,
)
from solid_lessons.lessons.dip.doubles import RecordingLogger


def main() -> None:
    user_service_dev = UserService(ConsoleLogger())
    user_service_prod = UserService(RemoteLogger())
    user_service_test = UserService(FileLogger())

    print("=== Testing different logging systems ===")

    print("\n1. Development (console logger):")
    user_service_dev.create_user("Ivan", "ivan@example.com")
    user_service_dev.delete_user("user123")

    print("\n2. Production (remote logger):")
    user_service_prod.create_user("Maria", "maria@example.com")
    user_service_prod.delete_user("user456")

    print("\n3. Testing (file logger):")
    user_service_test.create_user("Petro", "petro@example.com")
    user_service_test.delete_user("user789")

    print("\n4. Testing with a recording logger:")
    recording_logger = RecordingLogger()
    user_service_mock = UserService(recording_logger)

    user_service_mock.create_user("Test User", "test@example.com")
    print(f"Recorded logs: {recording_logger.get_logs()}")

    print("\n5. Python logging backend:")
    user_service_stdlib = UserService(StdlibLogger())
    user_service_stdlib.create_user("Olena", "olena@example.com")
    print("Messages sent to the 'solid_lessons.lessons.dip.logging_refactored' logger")


if __name__ == "__main__":
    main()
