"""Settings loader for applications composing an AccessControlClient.

The client library itself never reads the environment; call ``load_settings()``
from the application's entry point and hand the result to
``AccessControlClient.from_settings``.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class AccessControlSettings:
    """Access Control client configuration container."""
    # Explicit service URL; skips the host prefix rewrite when set
    base_url: Optional[str] = None
    # Prepended to the default hostname, e.g. "qa-" or "dev-"
    host_prefix: Optional[str] = None
    # Seconds; None leaves requests without a timeout
    timeout: Optional[float] = None


def _get_optional(var_name: str) -> Optional[str]:
    """Get environment variable, treating empty values as unset."""
    value = os.environ.get(var_name, "").strip()
    return value or None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"ACCESS_CONTROL_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"ACCESS_CONTROL_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings() -> AccessControlSettings:
    """Load client settings from environment variables.

    Variables:
        IMJS_URL_PREFIX: Hostname prefix for the default service URL
        ACCESS_CONTROL_BASE_URL: Explicit service URL
        ACCESS_CONTROL_TIMEOUT: Request timeout in seconds

    Raises:
        ValueError: If ACCESS_CONTROL_TIMEOUT is not a positive number
    """
    return AccessControlSettings(
        base_url=_get_optional("ACCESS_CONTROL_BASE_URL"),
        host_prefix=_get_optional("IMJS_URL_PREFIX"),
        timeout=_parse_timeout(_get_optional("ACCESS_CONTROL_TIMEOUT")),
    )
