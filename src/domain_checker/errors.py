from __future__ import annotations


class DomainCheckerError(Exception):
    """Base exception for domain checker failures."""


class InputFormatError(DomainCheckerError):
    """Raised when the line-oriented input does not match the expected layout."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
