"""Domain exceptions: all public errors of callorder.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application code raises these, never defines its own public exceptions.
"""


class CallOrderError(Exception):
    """Base for all callorder exceptions.

    Allows: except CallOrderError to catch all library errors.
    """


class InvalidTokenNameError(CallOrderError, ValueError):
    """Call token name is missing, not a string, or blank.

    Inherits ValueError for semantic correctness (bad value).

    Attributes:
        name: Rejected name (may be None).
    """

    def __init__(self, name: object, message: str) -> None:
        """Initialize with rejected name and message."""
        self.name = name
        super().__init__(message)


class DuplicateTokenNameError(CallOrderError, RuntimeError):
    """Call token name already registered.

    Inherits RuntimeError for semantic correctness (invalid registry state).

    Attributes:
        name: Duplicated name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with duplicated name."""
        self.name = name
        super().__init__(f'A method call token with the name "{name}" already exists.')


class InvalidTokenError(CallOrderError, TypeError):
    """Argument must be a CallToken.

    Inherits TypeError for semantic correctness (expected CallToken, got X).

    Attributes:
        argument: Name of the offending argument.
        got: Actual type received.
    """

    def __init__(self, argument: str, got: type) -> None:
        """Initialize with argument name and actual type."""
        self.argument = argument
        self.got = got
        super().__init__(f"{argument} must be a CallToken, got {got.__name__}")


class SequenceError(CallOrderError, AssertionError):
    """ValueSequence used incorrectly by the test.

    Inherits AssertionError so test runners report it as a failed assertion.
    """


class VerifierError(CallOrderError, AssertionError):
    """Expected call order declaration is invalid or was not met.

    Inherits AssertionError so test runners report it as a failed assertion.

    Attributes:
        order_number: 1-based index of the failing expected call order.
    """

    def __init__(self, message: str, *, order_number: int) -> None:
        """Initialize with message and failing expected call order index."""
        self.order_number = order_number
        super().__init__(message)
