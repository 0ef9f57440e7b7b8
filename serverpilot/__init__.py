"""
serverpilot - Python client for the ServerPilot API.

Example usage:

    from serverpilot import ServerPilot, NotFoundError

    sp = ServerPilot({"id": "your-client-id", "key": "your-api-key"})
    server = sp.server_create("www1")
    print(server["data"]["id"])

    try:
        sp.app_info("missing")
    except NotFoundError as e:
        print(e.code, e.message)

    # Raw response text instead of decoded JSON
    raw = ServerPilot({"id": "your-client-id", "key": "your-api-key", "decode": False})
    print(raw.server_list())
"""

__version__ = "1.0.0"

from .client import API_ENDPOINT, USER_AGENT, ServerPilot
from .exceptions import (
    DEFAULT_ERROR_MESSAGES,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    PaymentRequiredError,
    RequestTimeoutError,
    ServerPilotError,
    ServiceError,
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

__all__ = [
    # Version
    "__version__",
    # Client
    "ServerPilot",
    "API_ENDPOINT",
    "USER_AGENT",
    # Exceptions
    "ServerPilotError",
    "ConfigurationError",
    "ServiceError",
    "BadRequestError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "InternalServerError",
    "TransportError",
    "RequestTimeoutError",
    "DEFAULT_ERROR_MESSAGES",
    "error_from_response",
    # Configuration
    "ClientConfig",
    "HTTPMethod",
    # Server Models
    "ServerCreate",
    "ServerUpdate",
    # SSH Key Models
    "SSHKeyCreate",
    "SSHKeyRename",
    # System User Models
    "SysUserCreate",
    "SysUserUpdate",
    "SysUserSSHKey",
    # App Models
    "AppCreate",
    "AppUpdate",
    "WordPressInstall",
    # SSL Models
    "SSLAuto",
    "SSLAdd",
    "SSLForce",
    # Database Models
    "DatabaseCreate",
    "DatabaseUpdate",
    "DatabaseUserCreate",
    "DatabaseUserUpdate",
]
