"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StateError(DomainError):
    """Operation not allowed in the entity's current state."""


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def journal_entry_not_found(entry_id: str) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def duplicate_account_number(number: str) -> str:
    """Return message for duplicate account number."""
    return f"Account with number '{number}' already exists"


def invalid_account_prefix(category: str, prefix: str) -> str:
    """Return message when an account number does not match its category."""
    return f"Account number must start with {prefix} for {category} accounts"


def entry_not_pending(entry_id: str, status: str) -> str:
    """Return message when reviewing an entry that was already reviewed."""
    return f"Journal entry {entry_id} is {status}; only pending entries can be reviewed"
