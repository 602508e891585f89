from typing import Any, Optional


class NeopleApiError(Exception):
    """Raised for every failed call to the Neople Open API.

    Each transport adapter translates its library's failures (HTTP status
    errors, timeouts, connection problems) into this single type so callers
    can tell a normalized API failure apart from anything else.

    Attributes:
        status: The HTTP status code, or ``0`` when no HTTP response was
            received (network failure, timeout, transport-internal error).
        message: Human readable description of the failure.
        response: The raw response body or the underlying diagnostic object,
            if any.
    """

    def __init__(self, status: int, message: str, response: Optional[Any] = None):
        self.status = status
        self.message = message
        self.response = response
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"NeopleApiError(status={self.status!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": type(self).__name__,
            "status": self.status,
            "message": self.message,
            "response": self.response,
        }
