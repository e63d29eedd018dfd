"""Ledger error codes and the exception that carries them."""

import enum


class ErrorCode(enum.IntEnum):
    UNAUTHORIZED = 1
    NOT_FOUND = 2
    ALREADY_EXISTS = 3
    INVALID_INPUT = 4
    COURSE_FULL = 5
    ALREADY_ENROLLED = 6
    COURSE_NOT_STARTED = 7
    # Declared for compatibility with existing clients; no entry point raises it.
    COURSE_COMPLETED = 8


# HTTP status for each code when surfaced through the API
HTTP_STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.ALREADY_EXISTS: 409,
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.COURSE_FULL: 409,
    ErrorCode.ALREADY_ENROLLED: 409,
    ErrorCode.COURSE_NOT_STARTED: 409,
    ErrorCode.COURSE_COMPLETED: 409,
}


class LedgerError(Exception):
    """A rejected entry-point call. State is unchanged when this is raised."""

    def __init__(self, code: ErrorCode, message: str = ""):
        self.code = ErrorCode(code)
        self.message = message or self.code.name
        super().__init__(f"{self.code.name} ({int(self.code)}): {self.message}")

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_CODE[self.code]

    def to_dict(self) -> dict:
        return {"error": self.code.name, "code": int(self.code), "message": self.message}
