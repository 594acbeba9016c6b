"""
Configuration objects and helpers for the API client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .environment import build_environment

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DEFAULT_API_BASE",
    "DEFAULT_TIMEOUT",
    "load_client_config",
]

DEFAULT_API_BASE = "https://api.stripe.com"
DEFAULT_TIMEOUT = 80.0

_PARAMETER_TO_ENV_KEY = {
    "api_key": "STRIPE_SECRET_KEY",
    "api_base": "STRIPE_API_BASE",
    "api_version": "STRIPE_API_VERSION",
    "timeout": "STRIPE_TIMEOUT",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = None
    api_base: Optional[str] = None
    api_version: Optional[str] = None
    timeout: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("STRIPE_SECRET_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("STRIPE_SECRET_KEY must not be empty")
    if any(ch.isspace() for ch in key):
        raise ConfigError("STRIPE_SECRET_KEY must not contain whitespace")
    return key


def _normalize_api_base(raw_base: str) -> str:
    base = raw_base.strip().rstrip("/")
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"STRIPE_API_BASE is not a valid URL: '{raw_base}'")
    return base


def _parse_timeout(raw_timeout: str) -> float:
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"STRIPE_TIMEOUT must be a number of seconds, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("STRIPE_TIMEOUT must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    api_version: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        # keep the secret key out of logs and tracebacks
        return (
            f"ClientConfig(api_key='{self.masked_key}', api_base='{self.api_base}', "
            f"api_version={self.api_version!r}, timeout={self.timeout})"
        )

    @property
    def masked_key(self) -> str:
        return self.api_key[:8] + "..." if len(self.api_key) > 8 else "***"

    def url_for(self, path: str) -> str:
        return f"{self.api_base}{path}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_key = _normalize_api_key(values.get("STRIPE_SECRET_KEY"))
        api_base = _normalize_api_base(values.get("STRIPE_API_BASE", DEFAULT_API_BASE))

        api_version = values.get("STRIPE_API_VERSION") or None
        if api_version is not None:
            api_version = api_version.strip() or None

        timeout = _parse_timeout(values.get("STRIPE_TIMEOUT", str(DEFAULT_TIMEOUT)))

        return cls(
            api_key=api_key,
            api_base=api_base,
            api_version=api_version,
            timeout=timeout,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_base": api_base,
                "api_version": api_version,
                "timeout": timeout,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_base=api_base,
        api_version=api_version,
        timeout=timeout,
    )
