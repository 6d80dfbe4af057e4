"""Exceptions raised by the linked list types."""


class LinkedListError(Exception):
    """Base class for every linked list error."""


class EmptyListError(LinkedListError, IndexError):
    """Raised when an operation needs at least one element."""

    def __init__(self, message: str = "list is empty") -> None:
        super().__init__(message)


class IntegrityError(LinkedListError):
    """Raised when the node structure of a list is inconsistent."""