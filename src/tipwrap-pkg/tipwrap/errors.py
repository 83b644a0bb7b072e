"""Exceptions raised by tipwrap."""


class TipwrapError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(TipwrapError, ValueError):
    """A required argument was missing or outside its accepted range."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"{name} must not be None")


class DecodeDidNotConvergeError(TipwrapError, ValueError):
    """Repeated entity decoding kept changing the text past the iteration cap."""

    def __init__(self, iterations: int, text: str):
        self.iterations = iterations
        self.text = text
        super().__init__(
            f"HTML entity decoding did not reach a fixed point after {iterations} passes"
        )


def require(value: object, name: str) -> None:
    """Raise InvalidArgumentError when a required argument is None."""
    if value is None:
        raise InvalidArgumentError(name)
