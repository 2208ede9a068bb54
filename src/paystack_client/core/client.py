"""
HTTP client helpers for the Paystack API.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional, TypeVar

import requests

from .config import PaystackConfig
from .errors import DecodeError, RemoteRejectionError
from .models import Customer, InitializedTransaction, VerifiedTransaction
from .payloads import (
    build_charge_authorization_payload,
    build_customer_payload,
    build_initialize_transaction_payload,
)

__all__ = [
    "PaystackClient",
    "charge_authorization",
    "create_customer",
    "initialize_transaction",
    "validate_credentials",
    "verify_transaction",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

CUSTOMER_PATH = "/customer"
INITIALIZE_TRANSACTION_PATH = "/transaction/initialize"
CHARGE_AUTHORIZATION_PATH = "/transaction/charge_authorization"
VERIFY_TRANSACTION_PATH = "/transaction/verify/"


def _decode_envelope(raw_body: bytes, text: str) -> Mapping[str, Any]:
    if not raw_body.strip():
        raise DecodeError("Paystack returned an empty response body", body=text)
    try:
        payload = json.loads(raw_body)
    except ValueError as exc:
        raise DecodeError(f"Failed to parse JSON from Paystack: {text}", body=text) from exc

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise DecodeError(f"Paystack response has no 'data' object: {text}", body=text)
    return data


def _request(
    session: requests.Session,
    config: PaystackConfig,
    method: str,
    path: str,
    body: Optional[Mapping[str, Any]] = None,
    parse: Optional[Callable[[Mapping[str, Any]], T]] = None,
    *,
    timeout: Optional[float] = None,
) -> Optional[T]:
    url = config.url(path)

    logger.info("Submitting %s request to %s", method, url)
    with session.request(
        method,
        url,
        json=body,
        headers=config.auth_header,
        timeout=config.timeout_seconds if timeout is None else timeout,
    ) as response:
        raw_body = response.content
        text = response.text
        status_code = response.status_code

    if status_code != 200:
        logger.debug("Paystack rejected %s %s with status %s", method, url, status_code)
        raise RemoteRejectionError(status_code, text, raw_body=raw_body)

    if parse is None:
        return None

    data_object = _decode_envelope(raw_body, text)
    try:
        return parse(data_object)
    except (TypeError, ValueError) as exc:
        raise DecodeError(
            f"Unexpected shape in Paystack response: {exc}", body=text
        ) from exc


def validate_credentials(
    session: requests.Session,
    config: PaystackConfig,
    *,
    timeout: Optional[float] = None,
) -> None:
    """
    Check the secret by listing customers. Raises on any non-200 answer.
    """
    _request(session, config, "GET", CUSTOMER_PATH, timeout=timeout)


def create_customer(
    session: requests.Session,
    config: PaystackConfig,
    email: str,
    *,
    timeout: Optional[float] = None,
) -> Customer:
    return _request(
        session,
        config,
        "POST",
        CUSTOMER_PATH,
        build_customer_payload(email),
        Customer.from_response,
        timeout=timeout,
    )


def initialize_transaction(
    session: requests.Session,
    config: PaystackConfig,
    email: str,
    amount: int,
    *,
    timeout: Optional[float] = None,
) -> InitializedTransaction:
    """
    Start a transaction for ``email``. ``amount`` is in the smallest currency
    unit, e.g. cents instead of ZAR.
    """
    body = build_initialize_transaction_payload(email, amount)
    return _request(
        session,
        config,
        "POST",
        INITIALIZE_TRANSACTION_PATH,
        body,
        InitializedTransaction.from_response,
        timeout=timeout,
    )


def charge_authorization(
    session: requests.Session,
    config: PaystackConfig,
    email: str,
    amount: int,
    authorization_code: str,
    *,
    timeout: Optional[float] = None,
) -> InitializedTransaction:
    """Charge one of the customer's stored authorization codes."""
    body = build_charge_authorization_payload(email, amount, authorization_code)
    return _request(
        session,
        config,
        "POST",
        CHARGE_AUTHORIZATION_PATH,
        body,
        InitializedTransaction.from_response,
        timeout=timeout,
    )


def verify_transaction(
    session: requests.Session,
    config: PaystackConfig,
    reference: str,
    *,
    timeout: Optional[float] = None,
) -> VerifiedTransaction:
    # reference is embedded in the path as-is
    return _request(
        session,
        config,
        "GET",
        VERIFY_TRANSACTION_PATH + reference,
        parse=VerifiedTransaction.from_response,
        timeout=timeout,
    )


class PaystackClient:
    """
    Thin convenience wrapper around the Paystack endpoints.
    """

    def __init__(
        self,
        config: PaystackConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def from_secret(
        cls,
        secret: str,
        *,
        session: Optional[requests.Session] = None,
    ) -> "PaystackClient":
        return cls(PaystackConfig(secret=secret), session=session)

    def __enter__(self) -> "PaystackClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def validate_credentials(self, *, timeout: Optional[float] = None) -> None:
        validate_credentials(self.session, self.config, timeout=timeout)

    def create_customer(
        self, email: str, *, timeout: Optional[float] = None
    ) -> Customer:
        return create_customer(self.session, self.config, email, timeout=timeout)

    def initialize_transaction(
        self, email: str, amount: int, *, timeout: Optional[float] = None
    ) -> InitializedTransaction:
        return initialize_transaction(
            self.session, self.config, email, amount, timeout=timeout
        )

    def charge_authorization(
        self,
        email: str,
        amount: int,
        authorization_code: str,
        *,
        timeout: Optional[float] = None,
    ) -> InitializedTransaction:
        return charge_authorization(
            self.session,
            self.config,
            email,
            amount,
            authorization_code,
            timeout=timeout,
        )

    def verify_transaction(
        self, reference: str, *, timeout: Optional[float] = None
    ) -> VerifiedTransaction:
        return verify_transaction(
            self.session, self.config, reference, timeout=timeout
        )
