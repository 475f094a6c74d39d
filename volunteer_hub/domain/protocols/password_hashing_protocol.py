"""Password hashing protocol."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Hash and verify passwords.

    Implementations:
        - BcryptPasswordService
    """

    def hash_password(self, password: str) -> str: ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time check; False for malformed hashes."""
        ...
