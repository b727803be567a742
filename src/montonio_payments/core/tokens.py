"""
Helpers for issuing and verifying the JWTs exchanged with the Montonio gateway.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

import jwt

__all__ = [
    "ALGORITHM",
    "AUTH_TOKEN_TTL_SECONDS",
    "FINALIZED_STATUS",
    "PAYMENT_TOKEN_TTL_SECONDS",
    "PaymentInfo",
    "decode_payment_token",
    "get_auth_token",
    "get_payment_token",
    "get_reference_from_payment_token",
]

ALGORITHM = "HS256"
PAYMENT_TOKEN_TTL_SECONDS = 10 * 60
AUTH_TOKEN_TTL_SECONDS = 60 * 60
FINALIZED_STATUS = "finalized"


@dataclass(frozen=True)
class PaymentInfo:
    """
    A single payment request as understood by the Montonio gateway.

    Only ``amount``, ``merchant_reference`` and ``merchant_return_url`` are
    required. Nothing here is validated: the values are signed as they are and
    the gateway is the one enforcing its own rules (for example the accepted
    ``preselected_locale`` values ``en_US``, ``et``, ``lt`` and ``ru``).
    """

    amount: Union[Decimal, float, int]
    merchant_reference: str
    merchant_return_url: str
    currency: str = "EUR"
    merchant_name: Optional[str] = None
    merchant_notification_url: Optional[str] = None
    payment_information_unstructured: Optional[str] = None
    payment_information_structured: Optional[str] = None
    preselected_aspsp: Optional[str] = None
    preselected_locale: Optional[str] = None
    checkout_email: Optional[str] = None
    checkout_phone_number: Optional[str] = None
    checkout_first_name: Optional[str] = None
    checkout_last_name: Optional[str] = None

    def as_payload(self) -> Dict[str, Any]:
        """Return the flat claim set, leaving out optional fields that are unset."""
        payload: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            payload[item.name] = value
        return payload


PaymentLike = Union[PaymentInfo, Mapping[str, Any]]


class _ClaimEncoder(json.JSONEncoder):
    """Encodes ``Decimal`` amounts as JSON numbers."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            return float(o)
        return super().default(o)


def _sign(claims: Mapping[str, Any], secret_key: str, ttl: int, now: Optional[int]) -> str:
    issued_at = int(time.time()) if now is None else now
    body = dict(claims)
    body["iat"] = issued_at
    body["exp"] = issued_at + ttl
    return jwt.encode(body, secret_key, algorithm=ALGORITHM, json_encoder=_ClaimEncoder)


def get_payment_token(
    payment: PaymentLike,
    access_key: str,
    secret_key: str,
    *,
    now: Optional[int] = None,
) -> str:
    """
    Sign ``payment`` together with ``access_key`` into a token valid for 10 minutes.

    ``payment`` may be a :class:`PaymentInfo` or any mapping; mappings are
    signed unchanged, missing fields included.
    """
    claims = payment.as_payload() if isinstance(payment, PaymentInfo) else dict(payment)
    claims["access_key"] = access_key
    logging.debug(
        "Issuing payment token for merchant reference %s",
        claims.get("merchant_reference"),
    )
    return _sign(claims, secret_key, PAYMENT_TOKEN_TTL_SECONDS, now)


def get_auth_token(
    access_key: str,
    secret_key: str,
    *,
    now: Optional[int] = None,
) -> str:
    """Sign a token carrying only ``access_key``, valid for one hour."""
    return _sign({"access_key": access_key}, secret_key, AUTH_TOKEN_TTL_SECONDS, now)


def decode_payment_token(payment_token: str, secret_key: str) -> Dict[str, Any]:
    """
    Verify ``payment_token`` and return its claims.

    Signature, expiry and format problems raise the corresponding
    :class:`jwt.InvalidTokenError` subclass.
    """
    return jwt.decode(payment_token, secret_key, algorithms=[ALGORITHM])


def get_reference_from_payment_token(payment_token: str, secret_key: str) -> Optional[str]:
    """
    Return the merchant reference of a finalized payment, otherwise ``None``.

    A token that fails verification raises instead of returning ``None``; only
    a verified token describing something other than a finalized payment with
    a string reference yields ``None``.
    """
    decoded = decode_payment_token(payment_token, secret_key)

    if not isinstance(decoded, Mapping):
        return None

    if decoded.get("status") != FINALIZED_STATUS:
        logging.debug("Payment token status is %r, not finalized", decoded.get("status"))
        return None

    reference = decoded.get("merchant_reference")
    if not isinstance(reference, str):
        return None

    return reference
