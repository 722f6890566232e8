"""Exceptions raised by iterable-fns operations."""


class IterableFnsError(Exception):
    """Base class for every error raised by this package."""


class ElementNotFoundError(IterableFnsError, LookupError):
    """No element satisfied the predicate before the sequence was exhausted."""

    def __init__(self, message: str = "Element not found matching criteria"):
        super().__init__(message)


class EmptySequenceError(IterableFnsError, ValueError):
    """An aggregate that needs at least one element was given none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Can't find {operation} of an empty collection")


class InfiniteSequenceError(IterableFnsError, ValueError):
    """A bounded range was requested whose increment can never reach the bound."""

    def __init__(self, message: str = (
            "Iterable will never complete.\n"
            "Use init_infinite if this is desired behaviour")):
        super().__init__(message)
