"""Verification of signed login widget payloads."""

from loginwidget.authenticator import (
    LoginWidgetAuthenticator,
    LoginWidgetConfig,
    validate,
)
from loginwidget.canonical import CanonicalPayload, canonicalize, parse_payload
from loginwidget.errors import (
    InvalidHashError,
    InvalidInputError,
    LoginWidgetError,
    ValidationErrorKind,
    VerificationResult,
)
from loginwidget.verifier import derive_signing_key, sign, verify


__all__ = [
    "CanonicalPayload",
    "InvalidHashError",
    "InvalidInputError",
    "LoginWidgetAuthenticator",
    "LoginWidgetConfig",
    "LoginWidgetError",
    "ValidationErrorKind",
    "VerificationResult",
    "canonicalize",
    "derive_signing_key",
    "parse_payload",
    "sign",
    "validate",
    "verify",
]
