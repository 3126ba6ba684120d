"""Exceptions raised while extracting a flight window from a log export.

Row-level decode failures are not exceptions; they become sentinel rows.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for failures that make a whole file unusable."""


class ResourceUnavailable(ExtractionError):
    """The byte source could not be opened."""

    def __init__(self, label: str, reason: Optional[str] = None) -> None:
        message = f"cannot open {label}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.label = label
        self.reason = reason


class HeaderMismatch(ExtractionError):
    """One of the three signature lines is missing or does not match."""

    def __init__(self, line_number: int, expected: bytes, found: Optional[bytes]) -> None:
        if found is None:
            message = f"header line {line_number} missing, expected {expected!r}"
        else:
            message = f"header line {line_number} does not start with {expected!r}"
        super().__init__(message)
        self.line_number = line_number
        self.expected = expected
        self.found = found


__all__ = ["ExtractionError", "ResourceUnavailable", "HeaderMismatch"]
