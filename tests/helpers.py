"""Shared fixtures for the anz_bank_client tests."""

import base64
import json

import requests
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

KEY_ID = "a1b2c3d4-key"


def make_response(status_code=200, text="", url="https://secure.anz.co.nz/"):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


def json_response(payload, status_code=200):
    return make_response(status_code, json.dumps(payload))


def generate_key_pair():
    """Return (private_key, bare base64 public key as served by the portal)."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    der = private_key.public_key().public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return private_key, base64.b64encode(der).decode("ascii")


def login_page(key_b64, key_id=KEY_ID):
    return (
        "<html><script>\n"
        "  var loginConfig = {\n"
        f'    encryptionKey: "{key_b64}",\n'
        f'    encryptionKeyId: "{key_id}",\n'
        "    locale: \"en_NZ\"\n"
        "  };\n"
        "</script></html>"
    )


SESSION_PAGE = (
    "<html><script>\n"
    'var sessionCsrfToken = "csrf-0123456789abcdef";\n'
    "</script></html>"
)

INITIALISE = {
    "customerName": "J Citizen",
    "viewableAccounts": [
        {
            "accountNo": "01-1234-1234567-00",
            "accountUuid": "uuid-everyday",
            "nicknameEscaped": "Everyday",
            "productDescription": "Go Account",
            "accountOwnerName": "J Citizen",
            "accountBalance": {"amount": 200.5, "indicator": "credit"},
            "availableFunds": {"amount": 200.5},
            "isLoan": False,
            "isCreditCard": False,
            "isInvestment": False,
        },
        {
            "accountNo": "01-1234-7654321-90",
            "accountUuid": "uuid-home-loan",
            "nicknameEscaped": "Home loan",
            "productDescription": "Home Loan",
            "accountOwnerName": "J Citizen",
            "accountBalance": {"amount": 500, "indicator": "debit"},
            "isLoan": True,
        },
        {
            "accountNo": "4999-XXXX-XXXX-1234",
            "nicknameEscaped": "Visa",
            "productDescription": "Low Rate Visa",
            "isCreditCard": True,
        },
    ],
}
