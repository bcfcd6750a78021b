"""Runtime configuration helpers for loginwidget."""

from __future__ import annotations
from functools import lru_cache
from typing import Literal, cast
from dynaconf import Dynaconf


DigestCase = Literal["strict", "insensitive"]
"""Supported digest comparison policies."""

_DEFAULTS: dict[str, object] = {
    "BOT_TOKEN": None,
    "DIGEST_CASE": "strict",
}


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix="LOGINWIDGET",
        settings_files=[],  # No config files, env vars only
        load_dotenv=True,
        environments=False,
    )


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    case_raw = source.get("DIGEST_CASE", _DEFAULTS["DIGEST_CASE"])
    if case_raw is None:
        digest_case = str(_DEFAULTS["DIGEST_CASE"])
    else:
        digest_case = str(case_raw).lower()
    if digest_case not in {"strict", "insensitive"}:
        msg = "LOGINWIDGET_DIGEST_CASE must be either 'strict' or 'insensitive'."
        raise ValueError(msg)

    normalized = Dynaconf(
        envvar_prefix="LOGINWIDGET",
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )
    normalized.set("DIGEST_CASE", cast(DigestCase, digest_case))

    # Dynaconf parses env values as TOML, so a numeric-looking token arrives
    # as an int.
    token = source.get("BOT_TOKEN")
    normalized.set("BOT_TOKEN", str(token) if token not in (None, "") else None)

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


__all__ = ["DigestCase", "get_settings"]
