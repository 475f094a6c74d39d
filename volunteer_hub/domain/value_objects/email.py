"""Email value object with validation."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Validated, normalized email address.

    Uses the email-validator library; deliverability is not checked.

    Raises:
        ValueError: If the address is malformed.

    Example:
        >>> str(Email("Ana@Example.org"))
        'Ana@example.org'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        # Lookups are case-insensitive, so store the lowercase form
        object.__setattr__(self, "value", validated.normalized.lower())

    def __str__(self) -> str:
        return self.value
