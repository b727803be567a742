"""
URL builders for the Montonio payment gateway and its bank-list endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from .environment import Environment, EnvironmentLike, api_base_url, payments_base_url
from .tokens import get_auth_token

__all__ = [
    "BANK_LIST_PATH",
    "BankListRequest",
    "get_bank_list_url",
    "get_payment_url",
]

BANK_LIST_PATH = "/pis/v2/merchants/aspsps"


def get_payment_url(payment_token: str, env: EnvironmentLike = Environment.SANDBOX) -> str:
    """
    Return the URL the payer is redirected to.

    The token is inserted as-is; JWT segments are already URL safe.
    """
    return f"{payments_base_url(env)}?payment_token={payment_token}"


@dataclass(frozen=True)
class BankListRequest:
    """
    Everything needed to call the bank-list endpoint, without calling it.
    """

    url: str
    auth: str

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.auth}"}

    def to_request(self) -> requests.Request:
        """
        Return an unsent GET request; prepare and send it with your own session.
        """
        return requests.Request("GET", self.url, headers=self.headers())


def get_bank_list_url(
    access_key: str,
    secret_key: str,
    env: EnvironmentLike = Environment.SANDBOX,
    *,
    now: Optional[int] = None,
) -> BankListRequest:
    """Return the bank-list endpoint URL and a one-hour auth token; no HTTP call is made."""
    url = f"{api_base_url(env)}{BANK_LIST_PATH}"
    logging.debug("Built bank list request for %s", url)
    return BankListRequest(url=url, auth=get_auth_token(access_key, secret_key, now=now))
