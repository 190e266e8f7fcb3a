"""Exceptions raised by the Habitica client."""


class HabiticaError(Exception):
    """Base exception for all Habitica client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ApiError(HabiticaError):
    """The server answered with an error status and a structured body.

    Attributes:
        type: Service-defined error tag (e.g. ``NotAuthorized``).
        status: HTTP status code of the response.
        message: Human readable message from the response body.
    """

    def __init__(
        self,
        type: str | None = None,
        status: int | None = None,
        message: str | None = None,
    ):
        self.type = type
        self.status = status
        super().__init__(message or f"HTTP {status}", status_code=status)

    def __repr__(self) -> str:
        return f"ApiError(type={self.type!r}, status={self.status!r}, message={self.message!r})"


class UnknownConnectionError(HabiticaError):
    """No usable response came back from the server.

    Wraps network, DNS and timeout failures as well as error responses whose
    body could not be read. The raw failure is kept in ``original_error``.
    """

    MESSAGE = "An unknown error occurred while connecting to Habitica"

    def __init__(self, original_error: BaseException | None = None):
        self.original_error = original_error
        super().__init__(self.MESSAGE)
        self.__cause__ = original_error
