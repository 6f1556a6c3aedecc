"""Errors raised by the client."""

from typing import Optional


class ClientNetworkError(Exception):
    """A request to the PokéDex API failed.

    Attributes:
        message: Human readable description (the server's message when
            it sent one).
        error_type: The server's error class name (e.g.
            ``ConflictError``), if the response carried one.
        status_code: HTTP status, or ``None`` for transport failures.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
