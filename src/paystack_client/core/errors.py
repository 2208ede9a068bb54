"""
Exception types raised by the Paystack client.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "ConfigError",
    "DecodeError",
    "PaystackError",
    "RemoteRejectionError",
]


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


class PaystackError(RuntimeError):
    """Base class for failures reported by, or decoding responses from, Paystack."""


class RemoteRejectionError(PaystackError):
    """
    Paystack answered with a status other than 200.

    The message is the response body as text; ``raw_body`` keeps the bytes
    exactly as received. Paystack's error JSON is not parsed.
    """

    def __init__(
        self, status_code: int, body: str, *, raw_body: Optional[bytes] = None
    ) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body
        self.raw_body = body.encode("utf-8") if raw_body is None else raw_body


class DecodeError(PaystackError):
    """A 200 response whose body does not match the expected envelope."""

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body
