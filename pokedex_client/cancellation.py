"""Cooperative cancellation for async operations whose results may go stale."""


class CancellationToken:
    """Flag checked before applying the result of an async operation.

    Cancelling does not abort the underlying request; it only marks its
    result as unwanted.
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"
