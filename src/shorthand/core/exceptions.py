"""Exceptions raised by the Shorthand toolkit."""

__all__ = ["PreconditionError"]


class PreconditionError(TypeError):
    """A required argument was missing or of the wrong kind.

    Raised before any element is visited, so a caller never observes a
    partially evaluated operation.

    Attributes:
        operation: Name of the toolkit operation that rejected the call.
        argument: Name of the offending argument.
    """

    def __init__(self, operation: str, argument: str, message: str):
        super().__init__(f"{operation}(): {message}")
        self.operation = operation
        self.argument = argument
