"""Tests for handler __auth__ gates: the metaclass wraps run() with enforce()."""

import pytest

from hof.domain.auth.model.principal import AdminPrincipal
from hof.domain.shared.authorization.gate import admin_only, enforce, public
from hof.domain.shared.command import Command, CommandHandler, Result
from hof.domain.shared.error import AuthorizationError, ConfigurationError
from hof.domain.shared.query import Query, QueryHandler
from hof.domain.shared.query import Result as QueryResult


class EchoCommand(Command):
    value: str = "test"


class EchoResult(Result):
    value: str


class AdminEchoHandler(CommandHandler[EchoCommand, EchoResult]):
    __auth__ = admin_only()
    principal: AdminPrincipal

    async def run(self, cmd: EchoCommand) -> EchoResult:
        return EchoResult(value=cmd.value)


class PublicEchoHandler(CommandHandler[EchoCommand, EchoResult]):
    __auth__ = public()

    async def run(self, cmd: EchoCommand) -> EchoResult:
        return EchoResult(value=cmd.value)


class UnprotectedHandler(CommandHandler[EchoCommand, EchoResult]):
    async def run(self, cmd: EchoCommand) -> EchoResult:
        return EchoResult(value=cmd.value)


class EchoQuery(Query):
    value: str = "test"


class EchoQueryResult(QueryResult):
    value: str


class UnprotectedQueryHandler(QueryHandler[EchoQuery, EchoQueryResult]):
    async def run(self, query: EchoQuery) -> EchoQueryResult:
        return EchoQueryResult(value=query.value)


class TestAuthGateOnCommandHandler:
    @pytest.mark.asyncio
    async def test_admin_passes(self):
        handler = AdminEchoHandler(principal=AdminPrincipal(username="alice"))
        result = await handler.run(EchoCommand(value="hi"))
        assert result.value == "hi"

    @pytest.mark.asyncio
    async def test_missing_principal_denied(self):
        handler = AdminEchoHandler(principal=None)  # type: ignore[arg-type]
        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(EchoCommand())
        assert exc_info.value.code == "access_denied"

    @pytest.mark.asyncio
    async def test_public_needs_no_principal(self):
        result = await PublicEchoHandler().run(EchoCommand(value="ok"))
        assert result.value == "ok"

    @pytest.mark.asyncio
    async def test_missing_gate_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            await UnprotectedHandler().run(EchoCommand())


class TestAuthGateOnQueryHandler:
    @pytest.mark.asyncio
    async def test_missing_gate_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            await UnprotectedQueryHandler().run(EchoQuery())


class TestEnforce:
    def test_handlers_are_dataclasses(self):
        handler = AdminEchoHandler(principal=AdminPrincipal(username="bob"))
        assert handler.principal.username == "bob"

    def test_enforce_accepts_admin(self):
        enforce(AdminEchoHandler(principal=AdminPrincipal(username="bob")))
