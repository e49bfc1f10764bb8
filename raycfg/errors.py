"""Exceptions raised by the renderer."""


class RaytracerError(Exception):
    """Base class for renderer errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParsingError(RaytracerError):
    """Raised for bad command-line arguments or scene files."""