"""
Configuration objects and helpers for the Montonio gateway credentials.

Credentials are read from three layers, lowest priority first: the process
environment (or an explicit ``base`` mapping), an optional ``.env`` file that
never replaces keys already present, and explicit overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .environment import Environment, EnvironmentLike

__all__ = [
    "ConfigError",
    "MontonioConfig",
    "load_montonio_config",
]

ACCESS_KEY_VAR = "MONTONIO_ACCESS_KEY"
SECRET_KEY_VAR = "MONTONIO_SECRET_KEY"
ENVIRONMENT_VAR = "MONTONIO_ENVIRONMENT"

_PARAMETER_TO_ENV_KEY = {
    "access_key": ACCESS_KEY_VAR,
    "secret_key": SECRET_KEY_VAR,
    "environment": ENVIRONMENT_VAR,
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _read_dotenv(path: Path) -> Dict[str, str]:
    """Return the ``MONTONIO_*`` assignments found in ``path``."""
    found: Dict[str, str] = {}
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return found

    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key not in _PARAMETER_TO_ENV_KEY.values():
            continue
        found[key] = _unquote(value.strip())
    return found


def _resolve_values(
    *,
    env_file: Optional[str],
    base: Optional[Mapping[str, str]],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    source = os.environ if base is None else base
    values = {key: source[key] for key in _PARAMETER_TO_ENV_KEY.values() if key in source}

    if env_file is not None:
        for key, value in _read_dotenv(Path(env_file)).items():
            values.setdefault(key, value)

    values.update(overrides)
    return values


def _keyword_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for name, value in explicit.items():
        if value is None:
            continue
        if isinstance(value, Environment):
            value = value.value
        overrides[_PARAMETER_TO_ENV_KEY[name]] = str(value)
    return overrides


def _require(values: Mapping[str, str], key: str) -> str:
    raw = values.get(key)
    if raw is None:
        raise ConfigError(f"{key} must be provided")
    value = raw.strip()
    if not value:
        raise ConfigError(f"{key} must not be empty")
    return value


def _parse_environment(raw: str) -> Environment:
    try:
        return Environment(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(env.value for env in Environment)
        raise ConfigError(f"{ENVIRONMENT_VAR} must be one of {choices}, got '{raw}'") from exc


@dataclass(frozen=True)
class MontonioConfig:
    access_key: str
    secret_key: str = field(repr=False)
    environment: Environment = Environment.SANDBOX

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "MontonioConfig":
        return cls(
            access_key=_require(values, ACCESS_KEY_VAR),
            secret_key=_require(values, SECRET_KEY_VAR),
            environment=_parse_environment(
                values.get(ENVIRONMENT_VAR, Environment.SANDBOX.value)
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        environment: Optional[EnvironmentLike] = None,
    ) -> "MontonioConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(
            _keyword_overrides(
                {
                    "access_key": access_key,
                    "secret_key": secret_key,
                    "environment": environment,
                }
            )
        )
        return cls.from_mapping(
            _resolve_values(env_file=env_file, base=base, overrides=merged_overrides)
        )


def load_montonio_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    environment: Optional[EnvironmentLike] = None,
) -> MontonioConfig:
    """
    Convenience wrapper that mirrors :meth:`MontonioConfig.from_env`.

    Credentials can be provided through environment variables, a ``.env``
    file, direct keyword arguments, or any combination of the three.
    """
    return MontonioConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_key=access_key,
        secret_key=secret_key,
        environment=environment,
    )
