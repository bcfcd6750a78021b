"""Error taxonomy and result types for login widget verification."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reasons a login payload can be rejected."""

    INVALID_INPUT = "invalid_input"
    """Malformed or incomplete input; a client error, not a forgery."""
    INVALID_HASH = "invalid_hash"
    """The digest did not match; tampering, forgery or a wrong secret."""


class LoginWidgetError(ValueError):
    """Base error raised by the canonicalizer and verifier."""

    kind: ValidationErrorKind


class InvalidInputError(LoginWidgetError):
    """Raised when the payload or key material cannot be processed."""

    kind = ValidationErrorKind.INVALID_INPUT


class InvalidHashError(LoginWidgetError):
    """Raised when the computed digest differs from the supplied one."""

    kind = ValidationErrorKind.INVALID_HASH


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Outcome of a verification call.

    Carries no payload data: callers that need the fields parse them
    separately.
    """

    error: ValidationErrorKind | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the payload is authentic."""
        return self.error is None

    @classmethod
    def success(cls) -> VerificationResult:
        """Return a successful result."""
        return cls()

    @classmethod
    def failure(cls, kind: ValidationErrorKind) -> VerificationResult:
        """Return a failed result of the given kind."""
        return cls(error=kind)

    def raise_for_error(self) -> None:
        """Raise the typed error matching this result, if any."""
        if self.error is ValidationErrorKind.INVALID_INPUT:
            raise InvalidInputError("Login payload is malformed")
        if self.error is ValidationErrorKind.INVALID_HASH:
            raise InvalidHashError("Login payload hash does not match")

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    "InvalidHashError",
    "InvalidInputError",
    "LoginWidgetError",
    "ValidationErrorKind",
    "VerificationResult",
]
