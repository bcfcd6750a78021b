"""Keyed-hash verification of login widget data-check strings."""

from __future__ import annotations
import hashlib
import hmac
from loginwidget.errors import InvalidHashError, InvalidInputError


def derive_signing_key(secret: str) -> bytes:
    """Return the HMAC key for ``secret``: the SHA-256 digest of its bytes.

    The secret is never used as the HMAC key directly.
    """
    if not isinstance(secret, str):
        msg = "Application secret must be text"
        raise InvalidInputError(msg)
    try:
        secret_bytes = secret.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = "Application secret cannot be encoded as UTF-8"
        raise InvalidInputError(msg) from exc
    return hashlib.sha256(secret_bytes).digest()


def compute_hash(data_check_string: str, signing_key: bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``data_check_string``."""
    try:
        message = data_check_string.encode("utf-8")
    except UnicodeEncodeError as exc:
        msg = "Data-check string cannot be encoded as UTF-8"
        raise InvalidInputError(msg) from exc
    return hmac.new(signing_key, message, hashlib.sha256).hexdigest()


def sign(data_check_string: str, secret: str) -> str:
    """Compute the digest a provider holding ``secret`` would attach."""
    return compute_hash(data_check_string, derive_signing_key(secret))


def verify(
    data_check_string: str,
    digest: str,
    secret: str,
    *,
    case_sensitive: bool = True,
) -> None:
    """Check ``digest`` against the HMAC of ``data_check_string``.

    Args:
        data_check_string: Canonical payload text.
        digest: Hex digest supplied with the payload.
        secret: Application secret shared with the provider.
        case_sensitive: When ``False`` the supplied digest is lowercased
            before comparison.

    Raises:
        InvalidInputError: The key material could not be derived.
        InvalidHashError: The digests differ.
    """
    expected = compute_hash(data_check_string, derive_signing_key(secret))
    supplied = digest if case_sensitive else digest.lower()
    try:
        supplied_bytes = supplied.encode("ascii")
    except UnicodeEncodeError:
        supplied_bytes = b""
    if not supplied_bytes or not hmac.compare_digest(
        expected.encode("ascii"), supplied_bytes
    ):
        msg = "Login payload hash does not match"
        raise InvalidHashError(msg)


__all__ = ["compute_hash", "derive_signing_key", "sign", "verify"]
