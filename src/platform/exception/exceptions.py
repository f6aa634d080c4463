from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedValueError(CustomBaseError):
    """A single telemetry field could not be derived; only that field is skipped"""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f'Malformed value for {field}: {value!r}')


class InitializerRegistrationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
