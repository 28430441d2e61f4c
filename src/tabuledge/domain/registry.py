"""Account registry: canonical account and transaction records.

Raw records arrive as mappings from a document store or JSON file, with
camelCase keys (``initialBalance``, ``normalSide``) or snake_case ones.
Normalization never fails; absent fields fall back to empty text or zero.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from tabuledge.domain.entities import Account, LedgerTransaction
from tabuledge.domain.errors import ValidationError, invalid_account_prefix
from tabuledge.utils.amount_parser import to_decimal

CATEGORY_PREFIXES = {
    "asset": "1",
    "liability": "2",
    "equity": "3",
    "revenue": "4",
    "expense": "5",
}

DEBIT_NORMAL_CATEGORIES = ("asset", "expense")

FALSE_TEXT = ("false", "0", "no", "off")


def _pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _amount(value: Any) -> Decimal:
    amount = to_decimal(value)
    return amount if amount.is_finite() else Decimal(0)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_TEXT
    return bool(value)


def normalize_account(record: Mapping[str, Any] | Account) -> Account:
    """Convert a raw account record into an Account entity."""
    if isinstance(record, Account):
        return record

    normal_side = _pick(record, "normal_side", "normalSide")
    active = _pick(record, "active", default=True)
    return Account(
        id=_pick(record, "id"),
        name=_text(_pick(record, "name")),
        number=_text(_pick(record, "number")),
        category=_text(_pick(record, "category")),
        subcategory=_text(_pick(record, "subcategory")),
        normal_side=str(normal_side) if normal_side else None,
        initial_balance=_amount(_pick(record, "initial_balance", "initialBalance")),
        active=_flag(active),
        description=_text(_pick(record, "description")),
        statement=_text(_pick(record, "statement")),
        order=_text(_pick(record, "order")),
        comment=_text(_pick(record, "comment")),
        created_at=_pick(record, "created_at", "createdAt"),
        created_by=_pick(record, "created_by", "createdBy"),
    )


def normalize_transaction(
    record: Mapping[str, Any] | LedgerTransaction,
) -> LedgerTransaction:
    """Convert a raw ledger record into a LedgerTransaction entity.

    Dates are passed through untouched; see ``balances.effective_date``.
    """
    if isinstance(record, LedgerTransaction):
        return record

    return LedgerTransaction(
        id=_pick(record, "id"),
        account_id=_pick(record, "account_id", "accountId"),
        debit=_amount(_pick(record, "debit")),
        credit=_amount(_pick(record, "credit")),
        date=_pick(record, "date"),
        created_at=_pick(record, "created_at", "createdAt"),
        journal_entry_id=_pick(record, "journal_entry_id", "journalEntryId"),
        description=_pick(record, "description"),
    )


def is_debit_normal(account: Account) -> bool:
    """True if the account's balance increases with debits.

    An explicit normal side wins; otherwise assets and expenses are
    debit-normal and every other category is credit-normal.
    """
    side = (account.normal_side or "").lower()
    if side == "debit":
        return True
    if side == "credit":
        return False
    return account.type in DEBIT_NORMAL_CATEGORIES


def build_account_index(
    accounts: Iterable[Mapping[str, Any] | Account],
) -> dict[Any, Account]:
    """Normalize accounts and index them by id, preserving input order."""
    index: dict[Any, Account] = {}
    for record in accounts:
        account = normalize_account(record)
        index[account.id] = account
    return index


def category_prefix(category: str) -> str | None:
    """Return the account number prefix assigned to a category."""
    return CATEGORY_PREFIXES.get((category or "").strip().lower())


def validate_account_number(category: str, number: str) -> None:
    """Check that an account number is numeric and carries its category prefix.

    Raises:
        ValidationError: If the number is not all digits, the category is
            unknown, or the number does not start with the category prefix
    """
    number = str(number or "")
    if not (number.isascii() and number.isdigit()):
        raise ValidationError("Account number must be digits only")

    prefix = category_prefix(category)
    if prefix is None:
        raise ValidationError(
            f"Unknown category '{category}'. Expected one of: "
            + ", ".join(c.title() for c in CATEGORY_PREFIXES)
        )
    if not number.startswith(prefix):
        raise ValidationError(invalid_account_prefix(category, prefix))
