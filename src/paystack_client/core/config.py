"""
Configuration objects and helpers for the Paystack client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "PaystackConfig",
    "load_paystack_config",
]

DEFAULT_BASE_URL = "https://api.paystack.co"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "secret": "PAYSTACK_SECRET",
    "base_url": "PAYSTACK_BASE_URL",
    "timeout_seconds": "PAYSTACK_TIMEOUT_SECONDS",
}


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"PAYSTACK_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYSTACK_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class PaystackConfig:
    secret: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.secret or not self.secret.strip():
            raise ConfigError("PAYSTACK_SECRET must not be empty")
        if not self.base_url:
            raise ConfigError("PAYSTACK_BASE_URL must not be empty")
        if self.timeout_seconds <= 0:
            raise ConfigError("PAYSTACK_TIMEOUT_SECONDS must be greater than zero")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"PaystackConfig(secret='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    def url(self, path: str) -> str:
        return self.base_url + path

    @property
    def auth_header(self) -> Dict[str, str]:
        return {"Authorization": "Bearer " + self.secret}

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "PaystackConfig":
        secret = values.get("PAYSTACK_SECRET")
        if secret is None:
            raise ConfigError("PAYSTACK_SECRET env var not set")

        base_url = values.get("PAYSTACK_BASE_URL", DEFAULT_BASE_URL)
        timeout_seconds = _parse_timeout(
            values.get("PAYSTACK_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )

        return cls(
            secret=secret,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "PaystackConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(
            _collect_parameter_overrides(
                {
                    "secret": secret,
                    "base_url": base_url,
                    "timeout_seconds": timeout_seconds,
                }
            )
        )

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_paystack_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    secret: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> PaystackConfig:
    """
    Convenience wrapper that mirrors :meth:`PaystackConfig.from_env`.

    The secret can come from the process environment, a ``.env`` file, direct
    keyword arguments, or any combination of the three.
    """
    return PaystackConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        secret=secret,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
