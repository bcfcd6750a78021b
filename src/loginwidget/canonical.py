"""Canonicalization of login widget payloads into data-check strings.

The provider signs the payload fields, minus the ``hash`` field, rendered as
``key=value`` lines sorted by key. Only integer and text values take part;
every other JSON kind is dropped without error.
"""

from __future__ import annotations
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any
from loginwidget.errors import InvalidInputError


HASH_FIELD = "hash"
"""Reserved payload key holding the digest to verify."""

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class CanonicalPayload:
    """Digest to verify and the data-check string it should certify."""

    digest: str
    data_check_string: str


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a JSON value"
    raise ValueError(msg)


def _parse_json_int(literal: str) -> int | float:
    # -0 decodes as a float, so it is never signed.
    if literal == "-0":
        return -0.0
    return int(literal)


def parse_payload(raw: str | bytes | bytearray) -> Mapping[str, Any]:
    """Decode raw JSON text into a payload mapping.

    Raises:
        InvalidInputError: The text is not valid JSON or its top-level value
            is not an object.
    """
    try:
        tree = json.loads(
            raw, parse_constant=_reject_constant, parse_int=_parse_json_int
        )
    except (TypeError, ValueError, RecursionError) as exc:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors.
        msg = "Login payload is not valid JSON"
        raise InvalidInputError(msg) from exc
    if not isinstance(tree, Mapping):
        msg = "Login payload must be a JSON object"
        raise InvalidInputError(msg)
    return tree


def scalar_text(value: Any) -> str | None:
    """Return the canonical text of a signed scalar, or ``None`` to drop it."""
    if isinstance(value, str):
        return value
    # bool subclasses int but is not signed by the provider.
    if isinstance(value, int) and not isinstance(value, bool):
        if _INT64_MIN <= value <= _INT64_MAX:
            return str(value)
        return None
    return None


def build_data_check_string(fields: Iterable[tuple[str, str]]) -> str:
    """Join ``(key, value)`` pairs as sorted ``key=value`` lines."""
    return "\n".join(f"{key}={value}" for key, value in sorted(fields))


def canonicalize(tree: Any) -> CanonicalPayload:
    """Split a parsed payload into its digest and data-check string.

    Args:
        tree: Parsed JSON value. Must be a mapping with text keys.

    Raises:
        InvalidInputError: The value is not a mapping, has a non-text key, or
            lacks a usable ``hash`` field.
    """
    if not isinstance(tree, Mapping):
        msg = "Login payload must be a JSON object"
        raise InvalidInputError(msg)

    fields: dict[str, str] = {}
    for key, value in tree.items():
        if not isinstance(key, str):
            msg = "Login payload keys must be strings"
            raise InvalidInputError(msg)
        text = scalar_text(value)
        if text is not None:
            fields[key] = text

    digest = fields.pop(HASH_FIELD, None)
    if digest is None:
        msg = "Login payload has no hash field"
        raise InvalidInputError(msg)

    return CanonicalPayload(
        digest=digest,
        data_check_string=build_data_check_string(fields.items()),
    )


__all__ = [
    "HASH_FIELD",
    "CanonicalPayload",
    "build_data_check_string",
    "canonicalize",
    "parse_payload",
    "scalar_text",
]
