"""Custom exceptions for arnguard."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ArnGuardException(Exception):
    """Base class for arnguard exceptions."""

    message: str
    details: dict[str, object] | None = None

    def __str__(self) -> str:  # pragma: no cover - dataclass str wrapper
        return self.message


class InvalidResource(ArnGuardException):
    """Raised when a resource pattern is empty or starts with '/'."""


class ResourceParseError(ArnGuardException):
    """Raised when an ARN string cannot be parsed into a resource."""


class BucketMismatch(ArnGuardException):
    """Raised when a resource covers neither the bucket nor its objects."""


class BadConfig(ArnGuardException):
    """Raised when a configuration file cannot be parsed or validated."""
