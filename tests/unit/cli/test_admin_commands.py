"""Tests for the admin CLI commands (HTTP calls are faked)."""

import httpx
import pytest

from hof.cli.commands import admin


def _fake_request(status_code: int, payload, calls: list):
    def request(method, url, headers=None):
        calls.append((method, url, headers))
        return httpx.Response(status_code, json=payload, request=httpx.Request(method, url))

    return request


class TestAdminCommands:
    def test_missing_key_exits(self, monkeypatch):
        monkeypatch.delenv("HOF_ADMIN_KEY", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            admin.list_reports()
        assert exc_info.value.code == 1

    def test_remove_sends_key_and_json_header(self, monkeypatch):
        calls: list = []
        monkeypatch.setenv("HOF_SERVER", "http://hof.test")
        monkeypatch.setattr(admin.httpx, "request", _fake_request(200, {"message": "Report removed (ID: 4)"}, calls))

        admin.remove(4, key="k")

        ((method, url, headers),) = calls
        assert method == "DELETE"
        assert url == "http://hof.test/admin/remove/4"
        assert headers == {"Authorization": "k", "Content-Type": "application/json"}

    def test_list_uses_env_key(self, monkeypatch):
        calls: list = []
        monkeypatch.setenv("HOF_ADMIN_KEY", "from-env")
        monkeypatch.setattr(admin.httpx, "request", _fake_request(200, [], calls))

        admin.list_reports()

        assert calls[0][2]["Authorization"] == "from-env"

    def test_server_error_exits(self, monkeypatch):
        calls: list = []
        monkeypatch.setattr(
            admin.httpx,
            "request",
            _fake_request(404, {"code": "NotFound", "message": "Report not found: 9"}, calls),
        )

        with pytest.raises(SystemExit):
            admin.remove(9, key="k")

    def test_connection_refused_exits(self, monkeypatch):
        def refuse(method, url, headers=None):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(admin.httpx, "request", refuse)

        with pytest.raises(SystemExit):
            admin.list_reports(key="k")
