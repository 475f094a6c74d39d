"""Password value object with complexity validation."""

import re
from dataclasses import dataclass

MIN_LENGTH = 8
MAX_LENGTH = 72  # bcrypt only reads the first 72 bytes


@dataclass(frozen=True)
class Password:
    """Plaintext password that meets the complexity rules.

    Password Requirements:
        - 8 to 72 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit

    Raises:
        ValueError: If any requirement is not met.
    """

    value: str

    def __post_init__(self) -> None:
        if not MIN_LENGTH <= len(self.value.encode("utf-8")) <= MAX_LENGTH:
            raise ValueError(
                f"Password must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
            )
        if not re.search(r"[A-Z]", self.value):
            raise ValueError("Password must contain an uppercase letter")
        if not re.search(r"[a-z]", self.value):
            raise ValueError("Password must contain a lowercase letter")
        if not re.search(r"\d", self.value):
            raise ValueError("Password must contain a digit")

    def __str__(self) -> str:
        """Masked; never the plaintext."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
