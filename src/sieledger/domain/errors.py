"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvariantError(DomainError):
    """Data violates an accounting invariant (balance, accounting year)."""


class FieldLengthError(ValidationError):
    """A template field exceeds its maximum number of characters."""

    def __init__(self, field: str, value: str, limit: int):
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(
            f"Invalid template {field} '{value}'. Use max {limit} characters."
        )


class UnresolvedPlaceholderError(ValidationError):
    """A template still holds a placeholder when it is built."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unable to substitute template key '{{{key}}}'")


class UnknownAccountError(NotFoundError):
    """Account number is not part of the chart of accounts."""

    def __init__(self, number: str):
        self.number = number
        super().__init__(account_not_found(number))


class UnknownTemplateError(NotFoundError):
    """Template id is not registered."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(template_not_found(template_id))


class UnbalancedVerificationError(InvariantError):
    """Verification transactions do not sum to zero."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Verification '{text}' is not balanced")


class DateOutOfRangeError(InvariantError):
    """Verification date lies outside the configured accounting year."""

    def __init__(self, date: str):
        self.date = date
        super().__init__(f"Verification date {date} is out of bounds")


class MalformedDocumentError(DomainError):
    """SIE text is malformed.

    The line number, when known, is kept on the error and prefixed to the
    message so hand-edited files can be fixed.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class MalformedChartError(MalformedDocumentError):
    """A chart record has the wrong number of fields."""


class MismatchedAccountTypeError(MalformedDocumentError):
    """#KTYP does not refer to the account declared by the preceding #KONTO."""


class DanglingAccountError(MalformedDocumentError):
    """#KONTO was never completed by a matching #KTYP."""

    def __init__(self, number: str, line_number: Optional[int] = None):
        self.number = number
        super().__init__(f"Account type missing for '{number}'", line_number)


class EncodingError(DomainError):
    """Text cannot be represented in (or read from) the SIE charset."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        super().__init__(message)


def account_not_found(number: str) -> str:
    """Return message for missing account."""
    return f"Account {number} not found"


def template_not_found(template_id: str) -> str:
    """Return message for missing template."""
    return f"Template '{template_id}' does not exist"


def duplicate_account(number: str) -> str:
    """Return message for duplicate account number."""
    return f"Account with number '{number}' already exists"


def invalid_account_type(account_type: str, valid: str) -> str:
    """Return message for unknown account type codes."""
    return f"Invalid account type '{account_type}'. Must be one of: {valid}"


def invalid_amount(amount: str, reason: object) -> str:
    """Return message for unparseable amounts."""
    return f"Could not parse amount '{amount}': {reason}"
