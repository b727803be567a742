"""
Target environments of the Montonio gateway and the hostnames they map to.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

__all__ = [
    "Environment",
    "EnvironmentLike",
    "api_base_url",
    "payments_base_url",
    "resolve_environment",
]


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def host_prefix(self) -> str:
        return "sandbox-" if self is Environment.SANDBOX else ""


EnvironmentLike = Union[Environment, str]


def resolve_environment(env: EnvironmentLike) -> Environment:
    """
    Coerce ``env`` into an :class:`Environment`.

    Unknown values raise :class:`ValueError`; they are programming errors, not
    something to recover from at runtime.
    """
    if isinstance(env, Environment):
        return env
    return Environment(env)


def payments_base_url(env: EnvironmentLike = Environment.SANDBOX) -> str:
    return f"https://{resolve_environment(env).host_prefix}payments.montonio.com"


def api_base_url(env: EnvironmentLike = Environment.SANDBOX) -> str:
    return f"https://api.{resolve_environment(env).host_prefix}payments.montonio.com"
