"""
Minimal script that uses the public API to create a Montonio checkout link.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

from montonio_payments import ConfigError, PaymentInfo, create_client, load_montonio_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Montonio checkout link using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MONTONIO_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--access-key", help="Provide the access key without relying on environment data")
    parser.add_argument("--secret-key", help="Provide the secret key without relying on environment data")
    parser.add_argument(
        "--environment",
        choices=("sandbox", "production"),
        help="Override the target environment (default: sandbox)",
    )
    parser.add_argument("--amount", default="10.00", help="Payment amount in EUR")
    parser.add_argument("--reference", default="order-1", help="Order reference")
    parser.add_argument(
        "--return-url",
        default="https://example.com/return",
        help="Where the customer lands after paying",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_montonio_config(
            env_file=args.env_file,
            access_key=args.access_key,
            secret_key=args.secret_key,
            environment=args.environment,
        )
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    payment = PaymentInfo(
        amount=Decimal(args.amount),
        merchant_reference=args.reference,
        merchant_return_url=args.return_url,
    )
    link = client.checkout_url(payment)
    logging.info("Redirect the customer to %s", link.url)

    banks = client.bank_list_request()
    logging.info("Fetch available banks with GET %s", banks.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
