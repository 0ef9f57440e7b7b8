"""Tests for the request and configuration models."""

import pytest
from pydantic import ValidationError

from serverpilot import (
    AppCreate,
    AppUpdate,
    ClientConfig,
    ConfigurationError,
    DatabaseCreate,
    DatabaseUserCreate,
    HTTPMethod,
    ServerUpdate,
    SSLAdd,
    SysUserCreate,
)


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        config = ClientConfig.from_mapping({"id": "cid", "key": "secret"})
        assert config.decode is True
        assert config.timeout == 30.0

    def test_unknown_keys_are_ignored(self):
        config = ClientConfig.from_mapping({"id": "cid", "key": "secret", "region": "eu"})
        assert not hasattr(config, "region")

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_mapping({"id": "cid", "key": "secret", "timeout": 0})

    def test_frozen(self):
        config = ClientConfig(id="cid", key="secret")
        with pytest.raises(ValidationError):
            config.key = "other"


class TestPayloads:
    """Tests for payload serialization."""

    def test_server_update_omits_unset_fields(self):
        assert ServerUpdate().to_params() == {}
        assert ServerUpdate(firewall=False).to_params() == {"firewall": False}
        assert ServerUpdate(firewall=True, autoupdates=False).to_params() == {
            "firewall": True,
            "autoupdates": False,
        }

    def test_sysuser_create_uses_wire_names(self):
        payload = SysUserCreate(server_id="srv1", name="derek", password="")
        assert payload.to_params() == {"serverid": "srv1", "name": "derek", "password": ""}

    def test_app_create_accepts_wire_names(self):
        payload = AppCreate(name="blog", sysuserid="u1", runtime="php8.2")
        assert payload.sysuser_id == "u1"

    def test_app_create_invalid_wordpress(self):
        with pytest.raises(ValidationError):
            AppCreate(name="blog", sysuser_id="u1", runtime="php8.2", wordpress={"site_title": "x"})

    def test_app_update_keeps_empty_domains(self):
        assert AppUpdate(domains=[]).to_params() == {"domains": []}

    def test_ssl_add_keeps_null_cacerts(self):
        assert SSLAdd(key="k", cert="c").to_params() == {"key": "k", "cert": "c", "cacerts": None}

    def test_database_create_nests_user(self):
        payload = DatabaseCreate(
            app_id="app1",
            name="mydb",
            user=DatabaseUserCreate(name="dbuser", password="pw123456"),
        )
        assert payload.to_params() == {
            "appid": "app1",
            "name": "mydb",
            "user": {"name": "dbuser", "password": "pw123456"},
        }


def test_http_method_values():
    assert HTTPMethod("POST") is HTTPMethod.POST
    assert [m.value for m in HTTPMethod] == ["GET", "POST", "DELETE"]
