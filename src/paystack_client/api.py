"""
Public, high-level helpers for building a Paystack client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import PaystackClient
from .core.config import PaystackConfig, load_paystack_config

__all__ = [
    "create_paystack_client",
]


def create_paystack_client(
    *,
    config: Optional[PaystackConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    secret: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> PaystackClient:
    """
    Construct a :class:`PaystackClient`.

    Callers can either supply a ready-made :class:`PaystackConfig` or let the
    helper assemble one from ``PAYSTACK_*`` environment data. A missing or
    empty secret raises :class:`~paystack_client.core.errors.ConfigError`.
    """
    if config is not None:
        extras = (overrides, base, secret, base_url, timeout_seconds)
        # env_file is only read when assembling a config
        if env_file not in (".env", None) or any(
            item is not None and item != {} for item in extras
        ):
            raise ValueError(
                "Provide either a pre-built PaystackConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_paystack_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            secret=secret,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
    return PaystackClient(cfg, session=session)
