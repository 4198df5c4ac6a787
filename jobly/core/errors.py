"""
Error kinds raised by the data-access layer and request dependencies.

Every handled failure is a JoblyError subclass; main.py turns them into
`{"error": {"message": ..., "status": ...}}` responses.
"""

import enum
from typing import List, Union


class ErrorKind(int, enum.Enum):
    """Error kinds, valued by the HTTP status they surface as."""
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404


class JoblyError(Exception):
    """Base error; `message` may be a single string or a list of messages."""
    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: Union[str, List[str]] = ""):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.value


class BadRequestError(JoblyError):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: Union[str, List[str]] = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: Union[str, List[str]] = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: Union[str, List[str]] = "Forbidden"):
        super().__init__(message)


class NotFoundError(JoblyError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: Union[str, List[str]] = "Not Found"):
        super().__init__(message)


def format_validation_errors(errors: List[dict]) -> List[str]:
    """Flatten pydantic error dicts into "<location>: <message>" strings."""
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return messages
