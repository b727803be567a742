import time

import jwt
import pytest

from montonio_payments import Environment, get_auth_token, get_bank_list_url, get_payment_url

ACCESS_KEY = "a1b2c3d4-access"
SECRET_KEY = "merchant-secret-key-0123456789abcdef"
TOKEN = "eyJhbGciOiJIUzI1NiJ9.eyJhIjoxfQ.c2lnbmF0dXJl"


def test_payment_url_defaults_to_sandbox():
    url = get_payment_url(TOKEN)

    assert url == f"https://sandbox-payments.montonio.com?payment_token={TOKEN}"


def test_payment_url_for_production():
    url = get_payment_url(TOKEN, "production")

    assert url.startswith("https://payments.montonio.com?")
    assert url.endswith(f"payment_token={TOKEN}")


def test_payment_url_accepts_enum():
    assert get_payment_url(TOKEN, Environment.SANDBOX) == get_payment_url(TOKEN, "sandbox")


def test_unknown_environment_is_rejected():
    with pytest.raises(ValueError):
        get_payment_url(TOKEN, "staging")


def test_bank_list_for_production():
    before = int(time.time())
    request = get_bank_list_url(ACCESS_KEY, SECRET_KEY, env="production")

    assert request.url == "https://api.payments.montonio.com/pis/v2/merchants/aspsps"
    claims = jwt.decode(request.auth, SECRET_KEY, algorithms=["HS256"])
    assert set(claims) == {"access_key", "iat", "exp"}
    assert claims["access_key"] == ACCESS_KEY
    assert before + 3600 <= claims["exp"] <= int(time.time()) + 3600


def test_bank_list_defaults_to_sandbox():
    request = get_bank_list_url(ACCESS_KEY, SECRET_KEY)

    assert request.url == "https://api.sandbox-payments.montonio.com/pis/v2/merchants/aspsps"


def test_bank_list_request_carries_bearer_header():
    request = get_bank_list_url(ACCESS_KEY, SECRET_KEY, now=1_700_000_000)

    assert request.auth == get_auth_token(ACCESS_KEY, SECRET_KEY, now=1_700_000_000)
    assert request.headers() == {"Authorization": f"Bearer {request.auth}"}

    outgoing = request.to_request()
    assert outgoing.method == "GET"
    assert outgoing.url == request.url
    assert outgoing.headers["Authorization"] == f"Bearer {request.auth}"
