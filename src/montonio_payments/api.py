"""
Public, high-level helpers for integrating with the Montonio payment gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .core.client import CheckoutLink, MontonioClient
from .core.config import ConfigError, MontonioConfig, load_montonio_config
from .core.environment import Environment, EnvironmentLike
from .core.tokens import (
    PaymentInfo,
    decode_payment_token,
    get_auth_token,
    get_payment_token,
    get_reference_from_payment_token,
)
from .core.urls import BankListRequest, get_bank_list_url, get_payment_url

__all__ = [
    "BankListRequest",
    "CheckoutLink",
    "ConfigError",
    "Environment",
    "MontonioClient",
    "MontonioConfig",
    "PaymentInfo",
    "create_client",
    "decode_payment_token",
    "get_auth_token",
    "get_bank_list_url",
    "get_payment_token",
    "get_payment_url",
    "get_reference_from_payment_token",
    "load_montonio_config",
]


def create_client(
    *,
    config: Optional[MontonioConfig] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    environment: Optional[EnvironmentLike] = None,
) -> MontonioClient:
    """
    Construct a :class:`MontonioClient`.

    Callers can either supply a ready-made :class:`MontonioConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (overrides, base, access_key, secret_key, environment)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built MontonioConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_montonio_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            access_key=access_key,
            secret_key=secret_key,
            environment=environment,
        )
    return MontonioClient(cfg)
