"""AdminKeyring - resolves Authorization header values to admin principals."""

import hmac
import logging

from hof.config import AdminKey
from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.shared.error import AuthenticationError
from hof.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AdminKeyring(Service):
    """Shared-key authentication for the admin surface.

    Keys come from configuration and are fixed for the process lifetime.
    """

    _keys: tuple[AdminKey, ...]

    def authenticate(self, authorization: str | None) -> AdminPrincipal:
        """Return the admin whose key equals ``authorization``.

        Every configured key is compared so timing does not reveal which
        (if any) prefix matched.

        Raises:
            AuthenticationError: Header missing or not a configured key.
        """
        if not authorization:
            raise AuthenticationError("Missing admin key")

        presented = authorization.encode()
        matched: AdminKey | None = None
        for admin in self._keys:
            if hmac.compare_digest(admin.key.encode(), presented):
                matched = admin

        if matched is None:
            logger.warning("Rejected admin request with an unknown key")
            raise AuthenticationError("Invalid key")

        return AdminPrincipal(username=matched.username)
