"""Pydantic models for the ServerPilot client."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError


MISSING_CONFIG_MESSAGE = "Missing config data"
MISSING_CREDENTIALS_MESSAGE = "You must provide API credentials"


# Enums


class HTTPMethod(str, Enum):
    """HTTP verbs used by the ServerPilot API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


# Base Models


class ServerPilotBaseModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


class RequestPayload(ServerPilotBaseModel):
    """Body of a create-or-update request.

    Optional fields left as ``None`` were not provided by the caller and are
    not sent. Any other value, including ``False`` and ``""``, is sent.
    """

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# Client Configuration


class ClientConfig(ServerPilotBaseModel):
    """Immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    key: str = Field(min_length=1)
    decode: bool = True
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any] | None) -> "ClientConfig":
        """Validate a ``{"id", "key", "decode"}`` mapping.

        Raises:
            ConfigurationError: The mapping is empty, lacks credentials, or
                holds values of the wrong type.
        """
        if not config:
            raise ConfigurationError(MISSING_CONFIG_MESSAGE)
        if not config.get("id") or not config.get("key"):
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)

        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid config data: {e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e


# Server Models


class ServerCreate(RequestPayload):
    """Request model for creating a server."""

    name: str


class ServerUpdate(RequestPayload):
    """Request model for updating a server."""

    firewall: bool | None = None
    autoupdates: bool | None = None


# SSH Key Models


class SSHKeyCreate(RequestPayload):
    """Request model for adding an SSH key to the account."""

    name: str
    public_key: str


class SSHKeyRename(RequestPayload):
    """Request model for renaming an SSH key."""

    name: str


# System User Models


class SysUserCreate(RequestPayload):
    """Request model for creating a system user."""

    server_id: str = Field(alias="serverid")
    name: str
    password: str | None = None
    sshkey_id: str | None = None


class SysUserUpdate(RequestPayload):
    """Request model for changing a system user's password."""

    password: str


class SysUserSSHKey(RequestPayload):
    """Request model for attaching an SSH key to a system user."""

    sshkey_id: str


# App Models


class WordPressInstall(ServerPilotBaseModel):
    """WordPress installation settings for a new app."""

    site_title: str
    admin_user: str
    admin_password: str
    admin_email: str


class AppCreate(RequestPayload):
    """Request model for creating an app."""

    name: str
    sysuser_id: str = Field(alias="sysuserid")
    runtime: str
    domains: list[str] | None = None
    wordpress: WordPressInstall | None = None


class AppUpdate(RequestPayload):
    """Request model for updating an app."""

    runtime: str | None = None
    domains: list[str] | None = None


# SSL Models


class SSLAuto(RequestPayload):
    """Request model for enabling AutoSSL on an app."""

    auto: bool = True


class SSLAdd(RequestPayload):
    """Request model for installing a custom certificate."""

    key: str
    cert: str
    cacerts: str | None = None

    def to_params(self) -> dict[str, Any]:
        # cacerts is always sent, null when there is no CA chain
        return self.model_dump(by_alias=True)


class SSLForce(RequestPayload):
    """Request model for toggling the forced HTTPS redirect."""

    force: bool


# Database Models


class DatabaseUserCreate(ServerPilotBaseModel):
    """Credentials of the user created alongside a database."""

    name: str
    password: str


class DatabaseUserUpdate(ServerPilotBaseModel):
    """New password for an existing database user."""

    id: str
    password: str


class DatabaseCreate(RequestPayload):
    """Request model for creating a database."""

    app_id: str = Field(alias="appid")
    name: str
    user: DatabaseUserCreate


class DatabaseUpdate(RequestPayload):
    """Request model for updating a database user's password."""

    user: DatabaseUserUpdate
