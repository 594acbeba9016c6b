"""
Public, high-level helpers for building an API client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import StripeClient
from .core.config import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
)
from .core.environment import ClientEnvironment, build_environment, load_env_file

__all__ = [
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "StripeClient",
    "build_environment",
    "create_client",
    "load_client_config",
    "load_env_file",
]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout: Optional[float | int | str] = None,
) -> StripeClient:
    """
    Construct a :class:`StripeClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            api_base,
            api_version,
            timeout,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            api_base=api_base,
            api_version=api_version,
            timeout=timeout,
        )
    return StripeClient(cfg, session=session)
