"""
Typed snapshots of the objects returned inside Paystack's ``data`` envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

__all__ = [
    "Authorization",
    "Customer",
    "InitializedTransaction",
    "VerifiedTransaction",
]


def _str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def _bool(payload: Mapping[str, Any], key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean, got {value!r}")
    return value


@dataclass(frozen=True)
class Customer:
    id: int
    email: str
    customer_code: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Customer":
        return cls(
            id=_int(payload, "id"),
            email=_str(payload, "email"),
            customer_code=_str(payload, "customer_code"),
        )


@dataclass(frozen=True)
class InitializedTransaction:
    """Returned by both transaction initialization and authorization charges."""

    reference: str
    authorization_url: str
    access_code: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "InitializedTransaction":
        return cls(
            reference=_str(payload, "reference"),
            authorization_url=_str(payload, "authorization_url"),
            access_code=_str(payload, "access_code"),
        )


@dataclass(frozen=True)
class Authorization:
    """
    Card or bank details attached to a verified transaction.

    ``authorization_code`` can be reused with
    :meth:`paystack_client.PaystackClient.charge_authorization` when
    ``reusable`` is true.
    """

    authorization_code: str
    bin: str
    last4: str
    exp_month: str
    exp_year: str
    channel: str
    card_type: str
    bank: str
    country_code: str
    brand: str
    reusable: bool
    signature: str
    account_name: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Authorization":
        return cls(
            authorization_code=_str(payload, "authorization_code"),
            bin=_str(payload, "bin"),
            last4=_str(payload, "last4"),
            exp_month=_str(payload, "exp_month"),
            exp_year=_str(payload, "exp_year"),
            channel=_str(payload, "channel"),
            card_type=_str(payload, "card_type"),
            bank=_str(payload, "bank"),
            country_code=_str(payload, "country_code"),
            brand=_str(payload, "brand"),
            reusable=_bool(payload, "reusable"),
            signature=_str(payload, "signature"),
            account_name=_str(payload, "account_name"),
        )


@dataclass(frozen=True)
class VerifiedTransaction:
    """
    Result of verifying a transaction.

    ``status`` is passed through untouched: Paystack reports ``"success"``,
    ``"failed"`` or another value meaning the transaction is still pending.
    """

    id: int
    reference: str
    status: str
    authorization: Optional[Authorization] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "VerifiedTransaction":
        raw_authorization: Optional[Dict[str, Any]] = payload.get("authorization")
        authorization = None
        if raw_authorization is not None:
            if not isinstance(raw_authorization, Mapping):
                raise ValueError("authorization must be a JSON object")
            authorization = Authorization.from_response(raw_authorization)
        return cls(
            id=_int(payload, "id"),
            reference=_str(payload, "reference"),
            status=_str(payload, "status"),
            authorization=authorization,
        )
