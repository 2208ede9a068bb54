"""
Helpers for constructing the JSON bodies sent to Paystack.
"""

from __future__ import annotations

from typing import Dict

__all__ = [
    "build_charge_authorization_payload",
    "build_customer_payload",
    "build_initialize_transaction_payload",
]


def _amount_string(amount: int) -> str:
    # bool is an int subclass but never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(
            f"amount must be an integer in the smallest currency unit, got {amount!r}"
        )
    return str(amount)


def build_customer_payload(email: str) -> Dict[str, str]:
    return {"email": email}


def build_initialize_transaction_payload(email: str, amount: int) -> Dict[str, str]:
    """
    Body for ``/transaction/initialize``.

    Paystack expects ``amount`` as a decimal string in the smallest currency
    unit (kobo, cents, ...). No rounding or range checks are applied.
    """
    return {"email": email, "amount": _amount_string(amount)}


def build_charge_authorization_payload(
    email: str,
    amount: int,
    authorization_code: str,
) -> Dict[str, str]:
    """Body for ``/transaction/charge_authorization``."""
    return {
        "email": email,
        "amount": _amount_string(amount),
        "authorization_code": authorization_code,
    }
