"""Normalised views over the portal's account and transaction JSON."""

from dataclasses import dataclass
from typing import Any


def _dig(record: dict[str, Any], *keys: str) -> Any:
    """Walk nested mappings, returning None as soon as a key is missing."""
    value: Any = record
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def signed_balance(account: dict[str, Any]) -> float | None:
    """
    Return the account balance with liabilities made negative.

    The portal always reports a magnitude; overdrawn accounts, loans and
    credit cards are negated.  A missing balance stays None.
    """
    balance = _dig(account, "accountBalance", "amount")
    if balance is None:
        return None
    owing = (
        _dig(account, "accountBalance", "indicator") == "overdrawn"
        or bool(account.get("isLoan"))
        or bool(account.get("isCreditCard"))
    )
    return -balance if owing else balance


@dataclass
class Account:
    """One entry of the viewable-accounts roster."""

    account_no: str
    nickname: str | None = None
    account_type: str | None = None
    customer_name: str | None = None
    account_balance: float | None = None
    available_funds: float | None = None
    is_liability_type: bool = False
    supports_transactions: bool = True
    dynamic_balance: bool = False

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Account":
        return cls(
            account_no=raw.get("accountNo"),
            nickname=raw.get("nicknameEscaped"),
            account_type=raw.get("productDescription"),
            customer_name=raw.get("accountOwnerName"),
            account_balance=signed_balance(raw),
            available_funds=_dig(raw, "availableFunds", "amount"),
            is_liability_type=bool(raw.get("isLoan") or raw.get("isCreditCard")),
            dynamic_balance=bool(raw.get("isInvestment")),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "accountNo": self.account_no,
            "nickname": self.nickname,
            "accountType": self.account_type,
            "customerName": self.customer_name,
            "accountBalance": self.account_balance,
            "availableFunds": self.available_funds,
            "isLiabilityType": self.is_liability_type,
            "supportsTransactions": self.supports_transactions,
            "dynamicBalance": self.dynamic_balance,
        }


@dataclass
class Transaction:
    """A financial event on an account."""

    date: str | None
    posted_date: str | None
    details: Any
    amount: float
    currency_code: str | None
    type: str | None
    balance: float | None
    created_date_time: str | None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Transaction":
        return cls(
            date=raw.get("date"),
            posted_date=raw.get("postedDate"),
            details=raw.get("details"),
            amount=_dig(raw, "amount", "amount"),
            currency_code=_dig(raw, "amount", "currencyCode"),
            type=raw.get("type"),
            balance=_dig(raw, "balance", "amount"),
            created_date_time=raw.get("createdDateTime"),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "postedDate": self.posted_date,
            "details": self.details,
            "amount": self.amount,
            "currencyCode": self.currency_code,
            "type": self.type,
            "balance": self.balance,
            "createdDateTime": self.created_date_time,
        }


def is_financial(raw: dict[str, Any]) -> bool:
    """Entries without an amount are notices such as rate-change messages."""
    return raw.get("amount") is not None
