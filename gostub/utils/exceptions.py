"""Custom exceptions for the Go stub generator."""

from typing import Any


class GoStubError(Exception):
    """Base exception for stub generation errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def add_context(self, **context: Any) -> None:
        """Attach context without overwriting what is already there."""
        for key, value in context.items():
            if value is not None:
                self.details.setdefault(key, value)


class ConfigurationError(GoStubError):
    """Configuration related errors."""


class ParsingError(GoStubError):
    """Go source could not be parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line_number: int | None = None,
        language: str | None = None,
    ) -> None:
        super().__init__(message)
        if file_path:
            self.details["file_path"] = file_path
        if line_number:
            self.details["line_number"] = line_number
        if language:
            self.details["language"] = language


class UnresolvedTypeError(GoStubError):
    """The underlying kind of an identifier could not be determined."""

    def __init__(
        self,
        message: str,
        identifier: str | None = None,
        interface: str | None = None,
        method: str | None = None,
    ) -> None:
        super().__init__(message)
        self.add_context(identifier=identifier, interface=interface, method=method)


class MalformedSignatureError(GoStubError):
    """A method signature has no usable shape."""

    def __init__(
        self,
        message: str,
        interface: str | None = None,
        method: str | None = None,
    ) -> None:
        super().__init__(message)
        self.add_context(interface=interface, method=method)
