"""
Core primitives for signing, verifying and linking Montonio payments.
"""

from .client import CheckoutLink, MontonioClient
from .config import ConfigError, MontonioConfig, load_montonio_config
from .environment import Environment, resolve_environment
from .tokens import (
    PaymentInfo,
    decode_payment_token,
    get_auth_token,
    get_payment_token,
    get_reference_from_payment_token,
)
from .urls import BankListRequest, get_bank_list_url, get_payment_url

__all__ = [
    "BankListRequest",
    "CheckoutLink",
    "ConfigError",
    "Environment",
    "MontonioClient",
    "MontonioConfig",
    "PaymentInfo",
    "decode_payment_token",
    "get_auth_token",
    "get_bank_list_url",
    "get_payment_token",
    "get_payment_url",
    "get_reference_from_payment_token",
    "load_montonio_config",
    "resolve_environment",
]
