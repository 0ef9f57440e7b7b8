"""Synchronous HTTP client for the ServerPilot API.

This module provides :class:`ServerPilot`, a thin client backed by
``httpx.Client`` that exposes every ServerPilot resource (servers, SSH keys,
system users, apps, SSL, databases and actions) as a method.

Every method performs exactly one HTTP round trip through
:meth:`ServerPilot.send_request`, which handles authentication, JSON
serialization and the mapping of error responses to typed exceptions.
Nothing is retried.

Quick start::

    from serverpilot import ServerPilot

    with ServerPilot({"id": "client-id", "key": "api-key"}) as sp:
        servers = sp.server_list()
        for server in servers["data"]:
            print(server["id"], server["name"])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from . import __version__
from .exceptions import (
    RequestTimeoutError,
    TransportError,
    error_from_response,
)
from .models import (
    AppCreate,
    AppUpdate,
    ClientConfig,
    DatabaseCreate,
    DatabaseUpdate,
    DatabaseUserCreate,
    DatabaseUserUpdate,
    HTTPMethod,
    RequestPayload,
    ServerCreate,
    ServerUpdate,
    SSHKeyCreate,
    SSHKeyRename,
    SSLAdd,
    SSLAuto,
    SSLForce,
    SysUserCreate,
    SysUserSSHKey,
    SysUserUpdate,
    WordPressInstall,
)

logger = logging.getLogger(__name__)

API_ENDPOINT = "https://api.serverpilot.io/v1/"
USER_AGENT = f"serverpilot-python/{__version__}"


class ServerPilot:
    """Client for the ServerPilot REST API.

    Wraps ``httpx.Client`` and supports the context-manager protocol for
    deterministic resource cleanup::

        with ServerPilot({"id": "client-id", "key": "api-key"}) as sp:
            app = sp.app_create("blog", "sysuser-id", "php8.2", domains=["example.com"])

    Successful calls return the decoded JSON body (a ``dict``), or the raw
    body text when the client was configured with ``decode=False``.

    The client holds no per-call state, so one instance can be shared
    between threads.
    """

    def __init__(self, config: Mapping[str, Any] | ClientConfig | None) -> None:
        """Validate *config* and open the HTTP connection pool.

        Args:
            config: Mapping with the required ``id`` (client ID) and ``key``
                (API key) entries, an optional ``decode`` flag (default
                ``True``) and an optional ``timeout`` in seconds (default
                ``30``). A ready :class:`ClientConfig` is accepted as well.

        Raises:
            ConfigurationError: *config* is empty, lacks credentials, or
                holds invalid values.
        """
        if isinstance(config, ClientConfig):
            self.config = config
        else:
            self.config = ClientConfig.from_mapping(config)

        self._client = httpx.Client(
            base_url=API_ENDPOINT,
            auth=httpx.BasicAuth(self.config.id, self.config.key),
            headers={"User-Agent": USER_AGENT},
            timeout=self.config.timeout,
        )

    @property
    def decode(self) -> bool:
        return self.config.decode

    def __enter__(self) -> "ServerPilot":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool.

        This is called automatically when the client is used as a context
        manager.  After calling ``close()``, no further requests can be made.
        """
        self._client.close()

    def send_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> Any:
        """Execute a single request against the API.

        Args:
            path: URL path relative to the API endpoint (e.g. ``servers``).
            params: JSON body for ``POST`` requests. Ignored for ``GET`` and
                ``DELETE``.
            method: One of :class:`HTTPMethod`.

        Returns:
            The decoded JSON body (``None`` when the body is empty or not
            JSON), or the raw body text when ``decode`` is off.

        Raises:
            TransportError: The server could not be reached.
            RequestTimeoutError: The request exceeded the configured timeout.
            ServiceError: The API answered with a status other than 200.
        """
        method = HTTPMethod(method)
        kwargs: dict[str, Any] = {}
        if method is HTTPMethod.POST:
            kwargs["json"] = dict(params or {})
            kwargs["headers"] = {"Content-Type": "application/json"}

        logger.debug("ServerPilot request: %s %s", method.value, path)
        try:
            response = self._client.request(method.value, path, **kwargs)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Connection error: {e}") from e

        logger.debug("ServerPilot response: %s %s -> %s", method.value, path, response.status_code)
        if response.status_code != 200:
            self._handle_error_response(response)

        if not self.config.decode:
            return response.text
        try:
            return response.json()
        except ValueError:
            # an empty or non-JSON body on success decodes to None
            logger.debug("ServerPilot response body for %s %s is not JSON", method.value, path)
            return None

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Raise the typed exception for a non-200 response.

        Raises:
            ServiceError: Always; a status-specific subclass where one exists.
        """
        try:
            body = response.json()
        except ValueError:
            body = None
        raise error_from_response(response.status_code, body)

    def _post(self, path: str, payload: RequestPayload) -> Any:
        return self.send_request(path, payload.to_params(), HTTPMethod.POST)

    # -------------------------------------------------------------------------
    # Servers
    # -------------------------------------------------------------------------

    def server_list(self) -> Any:
        """Retrieve all servers on the account."""
        return self.send_request("servers")

    def server_create(self, name: str) -> Any:
        """Create a new server.

        Args:
            name: Nickname of the server, 1 to 255 characters from
                ``a-z0-9.-``.

        Returns:
            The new server, including the ``apikey`` used to connect the
            machine to ServerPilot.
        """
        return self._post("servers", ServerCreate(name=name))

    def server_info(self, server_id: str) -> Any:
        """Retrieve an existing server."""
        return self.send_request(f"servers/{server_id}")

    def server_delete(self, server_id: str) -> Any:
        """Delete a server."""
        return self.send_request(f"servers/{server_id}", method=HTTPMethod.DELETE)

    def server_update(
        self,
        server_id: str,
        firewall: bool | None = None,
        autoupdates: bool | None = None,
    ) -> Any:
        """Update a server.

        Only the settings passed explicitly are sent, so ``firewall=False``
        disables the firewall while leaving it out keeps the current state.

        Args:
            server_id: ID of the server.
            firewall: Whether the server firewall is enabled.
            autoupdates: Whether automatic system updates are enabled.
        """
        payload = ServerUpdate(firewall=firewall, autoupdates=autoupdates)
        return self._post(f"servers/{server_id}", payload)

    # -------------------------------------------------------------------------
    # SSH Keys
    # -------------------------------------------------------------------------

    def sshkeys_list(self) -> Any:
        """Retrieve all SSH keys on the account."""
        return self.send_request("sshkeys")

    def sshkeys_add(self, name: str, public_key: str) -> Any:
        """Add an SSH key to the account."""
        return self._post("sshkeys", SSHKeyCreate(name=name, public_key=public_key))

    def sshkeys_retrieve(self, sshkey_id: str) -> Any:
        return self.send_request(f"sshkeys/{sshkey_id}")

    def sshkeys_rename(self, sshkey_id: str, name: str) -> Any:
        return self._post(f"sshkeys/{sshkey_id}", SSHKeyRename(name=name))

    # -------------------------------------------------------------------------
    # System Users
    # -------------------------------------------------------------------------

    def sysuser_list(self) -> Any:
        """Retrieve all system users on the account."""
        return self.send_request("sysusers")

    def sysuser_create(
        self,
        server_id: str,
        name: str,
        password: str | None = None,
        sshkey_id: str | None = None,
    ) -> Any:
        """Create a system user on a server.

        Args:
            server_id: ID of the server the user is created on.
            name: User name, 3 to 32 characters from ``a-z0-9.-``.
            password: Login password, at least 8 characters without leading
                or trailing whitespace. A user without a password cannot
                log in with one.
            sshkey_id: ID of an account SSH key to authorize for the user.
        """
        payload = SysUserCreate(
            server_id=server_id,
            name=name,
            password=password,
            sshkey_id=sshkey_id,
        )
        return self._post("sysusers", payload)

    def sysuser_info(self, sysuser_id: str) -> Any:
        """Retrieve an existing system user."""
        return self.send_request(f"sysusers/{sysuser_id}")

    def sysuser_delete(self, sysuser_id: str) -> Any:
        """Delete a system user and every app it owns."""
        return self.send_request(f"sysusers/{sysuser_id}", method=HTTPMethod.DELETE)

    def sysuser_update(self, sysuser_id: str, password: str) -> Any:
        """Set a new password for a system user."""
        return self._post(f"sysusers/{sysuser_id}", SysUserUpdate(password=password))

    def sysuser_sshkey_add(self, sysuser_id: str, sshkey_id: str) -> Any:
        return self._post(f"sysusers/{sysuser_id}/sshkeys", SysUserSSHKey(sshkey_id=sshkey_id))

    def sysuser_sshkey_remove(self, sysuser_id: str, sshkey_id: str) -> Any:
        return self.send_request(
            f"sysusers/{sysuser_id}/sshkeys/{sshkey_id}",
            method=HTTPMethod.DELETE,
        )

    def sysuser_sshkey_list(self, sysuser_id: str) -> Any:
        return self.send_request(f"sysusers/{sysuser_id}/sshkeys")

    # -------------------------------------------------------------------------
    # Apps
    # -------------------------------------------------------------------------

    def app_list(self) -> Any:
        """Retrieve all apps on the account."""
        return self.send_request("apps")

    def app_create(
        self,
        name: str,
        sysuser_id: str,
        runtime: str,
        domains: list[str] | None = None,
        wordpress: WordPressInstall | Mapping[str, str] | None = None,
    ) -> Any:
        """Create an app.

        Args:
            name: Nickname of the app, 3 to 30 lowercase letters and digits.
            sysuser_id: System user that owns the app. Since every system
                user belongs to one server, this also picks the server.
            runtime: PHP runtime, e.g. ``"php8.2"``.
            domains: Domains the web server answers for. Setting
                ``example.com`` also serves ``www.example.com``.
            wordpress: When given, WordPress is installed on the app. Needs
                ``site_title``, ``admin_user``, ``admin_password`` (8+
                characters) and ``admin_email``.

        Returns:
            The new app along with the ``actionid`` of the provisioning
            action.
        """
        payload = AppCreate(
            name=name,
            sysuser_id=sysuser_id,
            runtime=runtime,
            domains=domains,
            wordpress=wordpress,
        )
        return self._post("apps", payload)

    def app_info(self, app_id: str) -> Any:
        """Retrieve an existing app."""
        return self.send_request(f"apps/{app_id}")

    def app_delete(self, app_id: str) -> Any:
        """Delete an app."""
        return self.send_request(f"apps/{app_id}", method=HTTPMethod.DELETE)

    def app_update(
        self,
        app_id: str,
        runtime: str | None = None,
        domains: list[str] | None = None,
    ) -> Any:
        """Update an app's runtime and/or domains.

        ``domains`` replaces the full domain list, so every domain the app
        should keep must be included.
        """
        return self._post(f"apps/{app_id}", AppUpdate(runtime=runtime, domains=domains))

    # -------------------------------------------------------------------------
    # SSL
    # -------------------------------------------------------------------------

    def ssl_auto(self, app_id: str) -> Any:
        """Enable AutoSSL on an app.

        Requires the Coach or Business plan. Use :meth:`ssl_delete` to
        remove the certificate.
        """
        return self._post(f"apps/{app_id}/ssl", SSLAuto())

    def ssl_add(
        self,
        app_id: str,
        key: str,
        cert: str,
        cacerts: str | None = None,
    ) -> Any:
        """Install a custom certificate on an app.

        Args:
            app_id: ID of the app.
            key: PEM contents of the private key.
            cert: PEM contents of the certificate.
            cacerts: PEM contents of the CA chain, or ``None`` for none.
        """
        return self._post(f"apps/{app_id}/ssl", SSLAdd(key=key, cert=cert, cacerts=cacerts))

    def ssl_delete(self, app_id: str) -> Any:
        """Remove SSL from an app."""
        return self.send_request(f"apps/{app_id}/ssl", method=HTTPMethod.DELETE)

    def ssl_force(self, app_id: str, force: bool) -> Any:
        """Turn the HTTP to HTTPS redirect on or off."""
        return self._post(f"apps/{app_id}/ssl", SSLForce(force=force))

    # -------------------------------------------------------------------------
    # Databases
    # -------------------------------------------------------------------------

    def database_list(self) -> Any:
        """Retrieve all databases on the account."""
        return self.send_request("dbs")

    def database_info(self, database_id: str) -> Any:
        """Retrieve an existing database."""
        return self.send_request(f"dbs/{database_id}")

    def database_create(self, app_id: str, name: str, username: str, password: str) -> Any:
        """Create a database and its user for an app.

        Args:
            app_id: ID of the app the database belongs to.
            name: Database name, 3 to 64 characters from ``a-z0-9-``.
            username: Name of the database user.
            password: Password of the database user.
        """
        payload = DatabaseCreate(
            app_id=app_id,
            name=name,
            user=DatabaseUserCreate(name=username, password=password),
        )
        return self._post("dbs", payload)

    def database_delete(self, database_id: str) -> Any:
        """Delete a database."""
        return self.send_request(f"dbs/{database_id}", method=HTTPMethod.DELETE)

    def database_update(self, database_id: str, user_id: str, password: str) -> Any:
        """Set a new password for a database user."""
        payload = DatabaseUpdate(user=DatabaseUserUpdate(id=user_id, password=password))
        return self._post(f"dbs/{database_id}", payload)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_info(self, action_id: str) -> Any:
        """Retrieve the status of an action.

        Mutating calls return an ``actionid``; poll this until its
        ``status`` is ``success`` or ``error``.
        """
        return self.send_request(f"actions/{action_id}")
