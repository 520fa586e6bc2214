"""
anz_bank_client
===============
Python client for ANZ New Zealand internet banking: logs in with an
RSA-encrypted password, keeps the cookie session, and lists accounts and
transactions.

Package structure
-----------------
anz_bank_client/
├── __init__.py       – package init and public API
├── config.py         – endpoint URLs and other constants
├── errors.py         – AuthError / ProtocolError / NotFoundError
├── logging_setup.py  – package logger and coloured CLI handler
├── session.py        – requests.Session factory
├── cookies.py        – YAML cookie-jar export / import
├── models.py         – Account and Transaction records
├── client.py         – Session: login, accounts, transactions, logout
├── cli.py            – argparse CLI (``python -m anz_bank_client``)
└── auth/             – sub-package: login-page scraping, password encryption
    ├── __init__.py
    ├── bootstrap.py  – encryption key / CSRF token extraction
    └── password.py   – PEM conversion and RSA PKCS#1 encryption

Quick start
-----------
    import anz_bank_client

    session = anz_bank_client.login("12345678", "your_password")
    for account in session.list_accounts():
        print(account.account_no, account.account_balance)

    saved = session.export()          # resume later with Session().load(saved)
"""

from .client import Session, login
from .errors import (
    AnzBankClientError,
    AuthError,
    NotFoundError,
    NotLoggedInError,
    ProtocolError,
)
from .models import Account, Transaction

__all__ = [
    "Session",
    "login",
    "Account",
    "Transaction",
    "AnzBankClientError",
    "AuthError",
    "NotFoundError",
    "NotLoggedInError",
    "ProtocolError",
]
