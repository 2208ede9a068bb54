"""
Core primitives for talking to the Paystack API.
"""

from .client import (
    PaystackClient,
    charge_authorization,
    create_customer,
    initialize_transaction,
    validate_credentials,
    verify_transaction,
)
from .config import PaystackConfig, load_paystack_config
from .environment import PaystackEnvironment, build_environment
from .errors import ConfigError, DecodeError, PaystackError, RemoteRejectionError
from .models import (
    Authorization,
    Customer,
    InitializedTransaction,
    VerifiedTransaction,
)

__all__ = [
    "Authorization",
    "ConfigError",
    "Customer",
    "DecodeError",
    "InitializedTransaction",
    "PaystackClient",
    "PaystackConfig",
    "PaystackEnvironment",
    "PaystackError",
    "RemoteRejectionError",
    "VerifiedTransaction",
    "build_environment",
    "charge_authorization",
    "create_customer",
    "initialize_transaction",
    "load_paystack_config",
    "validate_credentials",
    "verify_transaction",
]
