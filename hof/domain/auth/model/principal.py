"""AdminPrincipal - authenticated admin resolved per-request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminPrincipal:
    """The admin behind the current request.

    Only the username is kept; the key itself never leaves the keyring.
    """

    username: str

    def __str__(self) -> str:
        return self.username
