"""DI provider for admin authentication."""

import logging

from dishka import from_context, provide
from starlette.requests import Request

from hof.config import Config
from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.auth.service.keyring import AdminKeyring
from hof.domain.shared.error import InvalidPayloadError
from hof.util.di.base import Provider
from hof.util.di.scope import Scope

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def require_json(content_type: str | None) -> None:
    """Reject requests whose Content-Type is not JSON (parameters allowed)."""
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise InvalidPayloadError(
            f"Content-Type must be {JSON_MEDIA_TYPE}",
            field="Content-Type",
        )


class AuthProvider(Provider):
    """DI provider for the admin keyring and the per-request principal."""

    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_keyring(self, config: Config) -> AdminKeyring:
        logger.info("Admin keyring loaded with %d key(s)", len(config.admin.keys))
        return AdminKeyring(_keys=tuple(config.admin.keys))

    @provide(scope=Scope.UOW)
    def get_principal(self, request: Request, keyring: AdminKeyring) -> AdminPrincipal:
        """Authenticate the request, then check it is declared as JSON.

        Raises:
            AuthenticationError: Missing or unknown Authorization key.
            InvalidPayloadError: Content-Type is not application/json.
        """
        principal = keyring.authenticate(request.headers.get("Authorization"))
        require_json(request.headers.get("Content-Type"))
        return principal
