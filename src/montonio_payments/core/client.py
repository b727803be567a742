"""
Credential-bound wrapper around the Montonio token and URL helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import MontonioConfig
from .environment import Environment
from .tokens import (
    PaymentLike,
    decode_payment_token,
    get_payment_token,
    get_reference_from_payment_token,
)
from .urls import BankListRequest, get_bank_list_url, get_payment_url

__all__ = [
    "CheckoutLink",
    "MontonioClient",
]


@dataclass(frozen=True)
class CheckoutLink:
    token: str
    url: str


class MontonioClient:
    """
    Thin convenience wrapper that remembers the credentials and environment.
    """

    def __init__(self, config: MontonioConfig) -> None:
        self.config = config

    @property
    def environment(self) -> Environment:
        return self.config.environment

    def payment_token(self, payment: PaymentLike, *, now: Optional[int] = None) -> str:
        return get_payment_token(
            payment,
            self.config.access_key,
            self.config.secret_key,
            now=now,
        )

    def payment_url(self, payment_token: str) -> str:
        return get_payment_url(payment_token, self.config.environment)

    def checkout_url(self, payment: PaymentLike, *, now: Optional[int] = None) -> CheckoutLink:
        """
        Sign ``payment`` and build the redirect URL in one step.
        """
        token = self.payment_token(payment, now=now)
        return CheckoutLink(token=token, url=self.payment_url(token))

    def decode_token(self, payment_token: str) -> Dict[str, Any]:
        return decode_payment_token(payment_token, self.config.secret_key)

    def reference_from_token(self, payment_token: str) -> Optional[str]:
        return get_reference_from_payment_token(payment_token, self.config.secret_key)

    def bank_list_request(self, *, now: Optional[int] = None) -> BankListRequest:
        return get_bank_list_url(
            self.config.access_key,
            self.config.secret_key,
            self.config.environment,
            now=now,
        )
