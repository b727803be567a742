"""
Command-line interface for the Montonio payment helpers.
"""

from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence, Tuple

import jwt

from .api import ConfigError, MontonioClient, PaymentInfo, create_client, load_montonio_config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'") from exc
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"Invalid amount '{value}'")
    return amount


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="montonio-payments",
        description="Build and inspect Montonio payment tokens and links",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MONTONIO_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    payment = commands.add_parser(
        "payment-url",
        help="Sign a payment and print the URL the customer should visit",
    )
    payment.add_argument("--amount", type=_amount, required=True)
    payment.add_argument("--reference", required=True, help="Order reference in your system")
    payment.add_argument("--return-url", required=True)
    payment.add_argument("--currency", default="EUR")
    payment.add_argument("--notification-url")
    payment.add_argument("--merchant-name")
    payment.add_argument("--locale", help="One of en_US, et, lt, ru")
    payment.add_argument("--aspsp", help="Preselected bank identifier")

    reference = commands.add_parser(
        "reference",
        help="Verify a returned payment token and print its merchant reference",
    )
    reference.add_argument("token")

    commands.add_parser(
        "bank-list",
        help="Print the bank list endpoint URL and its bearer token",
    )
    return parser


def _payment_from_args(args: argparse.Namespace) -> PaymentInfo:
    return PaymentInfo(
        amount=args.amount,
        currency=args.currency,
        merchant_reference=args.reference,
        merchant_return_url=args.return_url,
        merchant_notification_url=args.notification_url,
        merchant_name=args.merchant_name,
        preselected_locale=args.locale,
        preselected_aspsp=args.aspsp,
    )


def _run_payment_url(client: MontonioClient, args: argparse.Namespace) -> int:
    link = client.checkout_url(_payment_from_args(args))
    logging.info("Issued payment token for reference %s", args.reference)
    print(link.url)
    return 0


def _run_reference(client: MontonioClient, args: argparse.Namespace) -> int:
    try:
        merchant_reference = client.reference_from_token(args.token)
    except jwt.InvalidTokenError as exc:
        logging.error("Payment token rejected: %s", exc)
        return 1

    if merchant_reference is None:
        logging.warning("Payment token does not describe a finalized payment")
        return 2

    print(merchant_reference)
    return 0


def _run_bank_list(client: MontonioClient, args: argparse.Namespace) -> int:
    request = client.bank_list_request()
    logging.info("Bank list endpoint for %s: %s", client.environment.value, request.url)
    print(request.url)
    print(request.auth)
    return 0


_HANDLERS = {
    "payment-url": _run_payment_url,
    "reference": _run_reference,
    "bank-list": _run_bank_list,
}


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_montonio_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    return _HANDLERS[args.command](client, args)
