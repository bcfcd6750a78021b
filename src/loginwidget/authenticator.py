"""Login widget authenticator binding a secret to the verification pipeline.

The public boundary accepts either the raw JSON text sent by the provider or
a mapping the caller already parsed. Failures are reported through
:class:`~loginwidget.errors.VerificationResult`; :meth:`ensure_valid` is the
raising variant.
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any
from dynaconf import Dynaconf
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from loginwidget.canonical import canonicalize, parse_payload
from loginwidget.config import get_settings
from loginwidget.errors import LoginWidgetError, VerificationResult
from loginwidget.verifier import verify


logger = logging.getLogger(__name__)

RawPayload = str | bytes | bytearray | Mapping[str, Any]
"""Raw JSON text or an already parsed payload mapping."""


class LoginWidgetConfig(BaseModel):
    """Configuration describing how payloads from a provider are verified."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bot_token: SecretStr = Field(
        description="Application secret shared with the provider"
    )
    case_sensitive_digest: bool = Field(
        default=True,
        description="Compare the supplied digest case-sensitively",
    )

    @field_validator("bot_token")
    @classmethod
    def _require_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            msg = "bot_token must not be empty"
            raise ValueError(msg)
        return value

    @classmethod
    def from_settings(cls, settings: Dynaconf | None = None) -> LoginWidgetConfig:
        """Create a configuration from Dynaconf settings."""
        source = settings if settings is not None else get_settings()
        token = source.get("BOT_TOKEN")
        if not token:
            msg = "LOGINWIDGET_BOT_TOKEN must be set to verify login payloads."
            raise ValueError(msg)
        return cls(
            bot_token=SecretStr(str(token)),
            case_sensitive_digest=source.get("DIGEST_CASE", "strict") == "strict",
        )


def _check(payload: RawPayload, secret: str, *, case_sensitive: bool) -> None:
    tree = (
        parse_payload(payload)
        if isinstance(payload, (str, bytes, bytearray))
        else payload
    )
    canonical = canonicalize(tree)
    verify(
        canonical.data_check_string,
        canonical.digest,
        secret,
        case_sensitive=case_sensitive,
    )


def validate(
    payload: RawPayload, secret: str, *, case_sensitive: bool = True
) -> VerificationResult:
    """Verify a login payload against ``secret`` without raising.

    Args:
        payload: Raw JSON text/bytes or an already parsed mapping.
        secret: Application secret, e.g. the bot token.
        case_sensitive: Whether the supplied digest must be lowercase hex.
    """
    try:
        _check(payload, secret, case_sensitive=case_sensitive)
    except LoginWidgetError as exc:
        logger.warning(
            "Login widget payload rejected",
            extra={
                "event": "login_widget_validation",
                "status": exc.kind.value,
                "reason": str(exc),
            },
        )
        return VerificationResult.failure(exc.kind)
    logger.debug(
        "Login widget payload verified",
        extra={"event": "login_widget_validation", "status": "verified"},
    )
    return VerificationResult.success()


class LoginWidgetAuthenticator:
    """Validates login widget payloads with a configured secret."""

    def __init__(self, config: LoginWidgetConfig) -> None:
        """Store the provider configuration for later validation."""
        self._config = config

    @classmethod
    def from_settings(
        cls, settings: Dynaconf | None = None
    ) -> LoginWidgetAuthenticator:
        """Build an authenticator from environment-backed settings."""
        return cls(LoginWidgetConfig.from_settings(settings))

    @property
    def config(self) -> LoginWidgetConfig:
        """Return the bound configuration."""
        return self._config

    def validate(self, payload: RawPayload) -> VerificationResult:
        """Return the verification outcome for ``payload``."""
        return validate(
            payload,
            self._config.bot_token.get_secret_value(),
            case_sensitive=self._config.case_sensitive_digest,
        )

    def ensure_valid(self, payload: RawPayload) -> None:
        """Raise a :class:`LoginWidgetError` unless ``payload`` is authentic."""
        _check(
            payload,
            self._config.bot_token.get_secret_value(),
            case_sensitive=self._config.case_sensitive_digest,
        )


__all__ = [
    "LoginWidgetAuthenticator",
    "LoginWidgetConfig",
    "RawPayload",
    "validate",
]
