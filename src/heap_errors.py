"""Exceptions raised by the keyed heap.

Each one signals a usage error at the call site. They subclass the built-in
exceptions the other containers raise for the same situations, so callers
that already catch ``IndexError`` or ``ValueError`` keep working.
"""


class HeapError(Exception):
    pass


class EmptyError(HeapError, IndexError):
    """The operation needs at least one element."""

    def __init__(self, message: str = "The heap is empty.") -> None:
        super().__init__(message)


class NotEmptyError(HeapError):
    """Bulk construction is only allowed on a fresh heap."""

    def __init__(self, message: str = "The heap is not empty.") -> None:
        super().__init__(message)


class InconsistentHandleError(HeapError, ValueError):
    """The handle no longer points at its own slot in the heap."""

    def __init__(
        self,
        message: str = "The element is inconsistent to the current state of the heap.",
    ) -> None:
        super().__init__(message)
