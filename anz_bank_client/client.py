"""
anz_bank_client.client
======================
The :class:`Session` – one logged-in connection to ANZ internet banking.

Login flow
----------
1. GET the pre-auth login page and scrape the RSA key and key id from it.
2. RSA/PKCS#1-encrypt the password with that key.
3. POST the credentials as JSON; the portal answers ``{"code": "success"}``.
4. GET the session page, which promotes the cookie to the secure domain
   and carries a CSRF token.
5. GET the initialise payload and cache it; it holds the account roster.

Everything after that is cookie-authenticated, so :meth:`Session.export`
and :meth:`Session.load` can persist and resume the session without
logging in again.
"""

import json
import logging
from typing import Any

import requests

from .auth.bootstrap import BootstrapExtractor, PatternBootstrapExtractor
from .auth.password import encrypt_password
from .config import (
    GOODBYE_URL,
    INITIALISE_URL,
    LOGIN_SUCCESS_CODE,
    LOGIN_URL,
    REQUEST_TIMEOUT,
    SESSION_URL,
    TRANSACTIONS_URL,
)
from .cookies import dump_cookies, load_cookies
from .errors import AuthError, NotFoundError, NotLoggedInError, ProtocolError
from .logging_setup import log as package_log
from .models import Account, Transaction, is_financial
from .session import build_session


class Session:
    """
    Stateful client for a single ANZ internet-banking login.

    Not safe for concurrent use: the cookie jar and cached roster are plain
    mutable state.  Separate instances share nothing.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        extractor: BootstrapExtractor | None = None,
        timeout: float = REQUEST_TIMEOUT,
        verify_ssl: bool = True,
    ) -> None:
        self.log = logger or package_log
        self.extractor = extractor or PatternBootstrapExtractor()
        self.timeout = timeout
        self.http = build_session(verify_ssl=verify_ssl)

        self.encryption_key: str | None = None
        self.encryption_key_id: str | None = None
        self.csrf_token: str | None = None
        self.initialise_response: dict[str, Any] | None = None

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def export(self) -> str:
        """Serialise the cookie jar and cached roster so the session can be restored."""
        return json.dumps({
            "cookies": dump_cookies(self.http.cookies),
            "initialise_response": json.dumps(self.initialise_response),
        })

    def load(self, data: str) -> None:
        """
        Restore a session written by :meth:`export`.

        Replaces the cookie jar and the cached roster.  Nothing records when
        the session was saved; an expired session shows up as a failed
        request on the next call.
        """
        try:
            record = json.loads(data)
        except ValueError as exc:
            raise ValueError(f"Invalid session data: {exc}") from exc
        if not isinstance(record, dict):
            raise ValueError("Invalid session data: expected a JSON object")

        initialise = record.get("initialise_response")
        if isinstance(initialise, str):
            try:
                initialise = json.loads(initialise)
            except ValueError as exc:
                raise ValueError(f"Invalid session data: {exc}") from exc
        if initialise is not None and not isinstance(initialise, dict):
            raise ValueError("Invalid session data: initialise_response must be an object")
        count = load_cookies(self.http.cookies, record.get("cookies") or "")
        self.initialise_response = initialise
        self.log.debug("Loaded session with %d cookies", count)

    # ------------------------------------------------------------------
    # Login / logout
    # ------------------------------------------------------------------

    def encrypt_password(self, password: str) -> str:
        """Encrypt *password* with the key scraped from the login page."""
        if not self.encryption_key:
            raise ProtocolError("No encryption key – fetch the login page first")
        try:
            return encrypt_password(password, self.encryption_key).strip()
        except ValueError as exc:
            raise ProtocolError(f"Unusable encryption key: {exc}") from exc

    def login(self, username: str, password: str) -> None:
        """
        Authenticate and cache the account roster.

        Raises AuthError when the portal refuses the login and ProtocolError
        when a later page is unavailable or has changed shape.  State set by
        the steps that did succeed is left in place.
        """
        if not username or not password:
            raise ValueError("username and password are required")

        self.log.info("Fetching login page")
        resp = self.http.get(LOGIN_URL, timeout=self.timeout)
        if resp.status_code != 200:
            raise AuthError("Error getting login page", resp.status_code, resp.text)

        keys = self.extractor.extract_login_keys(resp.text)
        self.encryption_key = keys.encryption_key
        self.encryption_key_id = keys.encryption_key_id
        encrypted_password = self.encrypt_password(password)

        self.log.info("Logging in as %s", username)
        resp = self.http.post(
            LOGIN_URL,
            json={
                "userId": username,
                "password": encrypted_password,
                "referrer": "",
                "firstPage": "",
                "publicKeyId": self.encryption_key_id,
            },
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )
        try:
            code = resp.json().get("code")
        except (ValueError, AttributeError):
            code = None
        if code != LOGIN_SUCCESS_CODE:
            raise AuthError("Error logging in", resp.status_code, resp.text)

        self.log.info("Fetching session details")
        resp = self.http.get(SESSION_URL, timeout=self.timeout)
        if resp.status_code != 200:
            raise ProtocolError("Session setup failed", resp.status_code, resp.text)
        # Not sent anywhere yet; the request itself sets up the secure session
        self.csrf_token = self.extractor.extract_csrf_token(resp.text)
        self.log.debug("CSRF token: %s…", self.csrf_token[:12])

        self.log.info("Getting initial details")
        resp = self.http.get(INITIALISE_URL, timeout=self.timeout)
        if resp.status_code != 200:
            raise ProtocolError("Error getting initial details", resp.status_code, resp.text)
        self.initialise_response = self._decode(resp, "initial details")
        self.log.debug("Cookies after login: %s", list(self.http.cookies.keys()))

    def logout(self) -> None:
        self.log.info("Logging out")
        resp = self.http.get(GOODBYE_URL, timeout=self.timeout)
        if resp.status_code != 200:
            raise ProtocolError("Error logging out", resp.status_code, resp.text)

    # ------------------------------------------------------------------
    # Accounts and transactions
    # ------------------------------------------------------------------

    def list_accounts(self) -> list[Account]:
        return [Account.from_api(raw) for raw in self._viewable_accounts()]

    def list_transactions(self, account_no: str, start_date: str, end_date: str) -> list[Transaction]:
        """
        Fetch transactions for *account_no* (e.g. ``01-1234-1234567-00``)
        between two ISO-8601 dates, newest posting first.
        """
        self.log.info(
            "Getting transactions for account %s from %s to %s",
            account_no, start_date, end_date,
        )
        account = next(
            (a for a in self._viewable_accounts() if a.get("accountNo") == account_no),
            None,
        )
        if account is None:
            raise NotFoundError(f"Could not find account {account_no}")
        account_uuid = account.get("accountUuid")
        if not account_uuid:
            raise NotFoundError(f"Could not find account {account_no}")

        resp = self.http.get(
            TRANSACTIONS_URL,
            params={
                "account": account_uuid,
                "ascending": "false",
                "from": start_date,
                "order": "postdate",
                "to": end_date,
            },
            timeout=self.timeout,
        )
        if resp.status_code != 200:
            raise ProtocolError("Error getting transactions", resp.status_code, resp.text)

        payload = self._decode(resp, "transactions")
        raw_transactions = payload.get("transactions") or []
        return [Transaction.from_api(t) for t in raw_transactions if is_financial(t)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _viewable_accounts(self) -> list[dict[str, Any]]:
        if self.initialise_response is None:
            raise NotLoggedInError("Not logged in – call login() or load() first")
        return self.initialise_response.get("viewableAccounts") or []

    @staticmethod
    def _decode(resp: requests.Response, what: str) -> dict[str, Any]:
        try:
            payload = resp.json()
        except ValueError as exc:
            raise ProtocolError(f"Invalid JSON in {what}", resp.status_code, resp.text) from exc
        if not isinstance(payload, dict):
            raise ProtocolError(f"Unexpected {what} payload", resp.status_code, resp.text)
        return payload


def login(username: str, password: str, **kwargs) -> Session:
    """Create a :class:`Session`, log it in and return it."""
    session = Session(**kwargs)
    session.login(username, password)
    return session
