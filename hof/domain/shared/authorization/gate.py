"""Handler-level authorization gates: public() and admin_only()."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.shared.error import AuthorizationError, ConfigurationError

logger = logging.getLogger("hof.authz")


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""


@dataclass(frozen=True)
class AdminOnly(Gate):
    """Requires an authenticated admin principal on the handler."""


_PUBLIC = Public()
_ADMIN_ONLY = AdminOnly()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def admin_only() -> AdminOnly:
    """Mark a handler as requiring an admin key."""
    return _ADMIN_ONLY


def enforce(handler: Any) -> None:
    """Evaluate the handler's ``__auth__`` gate against its ``principal``.

    Raises:
        ConfigurationError: The handler declares no gate.
        AuthorizationError: The gate requires an admin and none is attached.
    """
    gate = getattr(type(handler), "__auth__", None)
    if not isinstance(gate, Gate):
        raise ConfigurationError(f"Handler {type(handler).__name__} has no __auth__ declaration")

    if isinstance(gate, Public):
        return

    if isinstance(gate, AdminOnly):
        principal = getattr(handler, "principal", None)
        if not isinstance(principal, AdminPrincipal):
            raise AuthorizationError(
                f"Access denied: {type(handler).__name__} requires an admin key",
                code="access_denied",
            )
        logger.debug("Auth check passed: handler=%s, admin=%s", type(handler).__name__, principal.username)
        return

    raise ConfigurationError(  # pragma: no cover
        f"Handler {type(handler).__name__} has unhandled __auth__ type: {type(gate).__name__}"
    )
