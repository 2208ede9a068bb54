"""
Public facade for the Paystack client package.

The most useful pieces are re-exported so integrators can
``from paystack_client import ...`` without navigating the package.
"""

from .api import create_paystack_client
from .core import (
    Authorization,
    ConfigError,
    Customer,
    DecodeError,
    InitializedTransaction,
    PaystackClient,
    PaystackConfig,
    PaystackEnvironment,
    PaystackError,
    RemoteRejectionError,
    VerifiedTransaction,
    build_environment,
    load_paystack_config,
)

__all__ = (
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
    "create_paystack_client",
    "load_paystack_config",
)
