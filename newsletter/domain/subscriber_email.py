from __future__ import annotations

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from newsletter.errors import InvalidEmailError


@dataclass(frozen=True, slots=True)
class SubscriberEmail:
    """A syntactically valid email address.

    Syntax checking is delegated to email-validator; no DNS lookups are made.
    The stored value is the input as submitted, not the normalized form.
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(self.value) from e

    @classmethod
    def parse(cls, raw: str) -> SubscriberEmail:
        return cls(raw)

    def __str__(self) -> str:
        return self.value
