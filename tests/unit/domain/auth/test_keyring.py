"""Tests for AdminKeyring shared-key authentication."""

import pytest

from hof.config import AdminKey
from hof.domain.auth.service.keyring import AdminKeyring
from hof.domain.auth.util.di.provider import require_json
from hof.domain.shared.error import AuthenticationError, InvalidPayloadError


@pytest.fixture
def keyring() -> AdminKeyring:
    return AdminKeyring(
        _keys=(
            AdminKey(username="alice", key="alice-secret"),
            AdminKey(username="bob", key="bob-secret"),
        )
    )


class TestAdminKeyring:
    def test_known_key_resolves_username(self, keyring):
        assert keyring.authenticate("bob-secret").username == "bob"

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_key(self, keyring, header):
        with pytest.raises(AuthenticationError) as exc_info:
            keyring.authenticate(header)
        assert exc_info.value.code == "Unauthorized"

    @pytest.mark.parametrize("header", ["alice", "alice-secret ", "ALICE-SECRET", "Bearer alice-secret"])
    def test_near_misses_rejected(self, keyring, header):
        with pytest.raises(AuthenticationError):
            keyring.authenticate(header)


class TestRequireJson:
    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json; charset=utf-8", "Application/JSON"],
    )
    def test_json_accepted(self, content_type):
        require_json(content_type)

    @pytest.mark.parametrize("content_type", [None, "", "text/plain", "application/jsonp"])
    def test_other_media_types_rejected(self, content_type):
        with pytest.raises(InvalidPayloadError) as exc_info:
            require_json(content_type)
        assert exc_info.value.field == "Content-Type"
