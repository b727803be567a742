"""
Public facade for the Montonio payment helper package.

The most useful pieces are re-exported here so integrators can
``from montonio_payments import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    BankListRequest,
    CheckoutLink,
    ConfigError,
    Environment,
    MontonioClient,
    MontonioConfig,
    PaymentInfo,
    decode_payment_token,
    get_auth_token,
    get_bank_list_url,
    get_payment_token,
    get_payment_url,
    get_reference_from_payment_token,
    load_montonio_config,
)

__all__ = (
    "BankListRequest",
    "CheckoutLink",
    "ConfigError",
    "Environment",
    "MontonioClient",
    "MontonioConfig",
    "PaymentInfo",
    "create_client",
    "decode_payment_token",
    "get_auth_token",
    "get_bank_list_url",
    "get_payment_token",
    "get_payment_url",
    "get_reference_from_payment_token",
    "load_montonio_config",
)
