#!/usr/bin/env python3
"""
ServerPilot Python Client - Basic Usage Example

This example walks through a typical provisioning flow:
- Client initialization
- Creating a system user, an app and its database
- Waiting for the provisioning action to finish
- Enabling SSL
- Error handling

Prerequisites:
    pip install serverpilot

Run with:
    SERVERPILOT_CLIENT_ID=... SERVERPILOT_API_KEY=... SERVERPILOT_SERVER_ID=... python basic_usage.py
"""

import logging
import os
import sys
import time

from serverpilot import ServerPilot
from serverpilot.exceptions import (
    ConfigurationError,
    ConflictError,
    NotFoundError,
    PaymentRequiredError,
    ServiceError,
    TransportError,
)

# =============================================================================
# Configuration
# =============================================================================

CLIENT_ID = os.environ.get("SERVERPILOT_CLIENT_ID", "")
API_KEY = os.environ.get("SERVERPILOT_API_KEY", "")
SERVER_ID = os.environ.get("SERVERPILOT_SERVER_ID", "")


# =============================================================================
# Client Initialization
# =============================================================================

def initialize_client() -> ServerPilot:
    """
    Create a ServerPilot client.

    Construction fails with ConfigurationError when credentials are missing.
    """
    return ServerPilot({
        "id": CLIENT_ID,
        "key": API_KEY,
        "decode": True,     # return parsed JSON instead of raw text
        "timeout": 30.0,    # seconds
    })


# =============================================================================
# Provisioning Examples
# =============================================================================

def wait_for_action(client: ServerPilot, action_id: str, poll_interval: float = 2.0) -> str:
    """
    Poll an action until it leaves the ``open`` state.

    Mutating calls return an ``actionid`` for work that completes on the
    server asynchronously.
    """
    while True:
        status = client.action_info(action_id)["data"]["status"]
        if status != "open":
            return status
        time.sleep(poll_interval)


def create_app_example(client: ServerPilot) -> str:
    """
    Create a system user and a WordPress app owned by it.
    """
    print("\n--- Create App ---\n")

    sysuser = client.sysuser_create(SERVER_ID, "blogowner", password="s3cure-passw0rd")
    sysuser_id = sysuser["data"]["id"]
    print(f"System user created: {sysuser_id}")

    app = client.app_create(
        "blog",
        sysuser_id,
        "php8.2",
        domains=["example.com"],
        wordpress={
            "site_title": "My Blog",
            "admin_user": "admin",
            "admin_password": "change-me-please",
            "admin_email": "admin@example.com",
        },
    )
    app_id = app["data"]["id"]
    print(f"App created: {app_id}")

    status = wait_for_action(client, app["actionid"])
    print(f"Provisioning finished with status: {status}")

    return app_id


def database_example(client: ServerPilot, app_id: str) -> None:
    """
    Create a database for an app and rotate its user's password.
    """
    print("\n--- Databases ---\n")

    try:
        db = client.database_create(app_id, "blogdb", "bloguser", "initialpw")
    except ConflictError as e:
        print(f"Database already exists: {e.message}")
        return

    data = db["data"]
    print(f"Database created: {data['id']}")
    client.database_update(data["id"], data["user"]["id"], "rotatedpw")
    print("Database user password rotated")


def ssl_example(client: ServerPilot, app_id: str) -> None:
    """
    Enable AutoSSL and force HTTPS. Requires a paid plan.
    """
    print("\n--- SSL ---\n")

    try:
        client.ssl_auto(app_id)
        client.ssl_force(app_id, True)
        print("AutoSSL enabled with forced HTTPS redirect")
    except PaymentRequiredError as e:
        print(f"SSL not available on this plan: {e.message}")


# =============================================================================
# Error Handling Example
# =============================================================================

def error_handling_example(client: ServerPilot) -> None:
    """
    Every non-200 response raises a ServiceError subclass carrying the
    HTTP status and the service's message (or a default one).
    """
    print("\n--- Error Handling ---\n")

    try:
        client.app_info("does-not-exist")
    except NotFoundError as e:
        print(f"Not found ({e.code}): {e.message}")
    except ServiceError as e:
        print(f"API error ({e.code}): {e.message}")


def raw_response_example() -> None:
    """
    With ``decode`` off, successful calls return the body text unchanged.
    """
    print("\n--- Raw Responses ---\n")

    with ServerPilot({"id": CLIENT_ID, "key": API_KEY, "decode": False}) as client:
        body = client.server_list()
        print(f"Raw body ({len(body)} characters): {body[:80]}")


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Main function to run all examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    print("=" * 60)
    print("ServerPilot Python Client - Basic Usage Examples")
    print("=" * 60)

    try:
        client = initialize_client()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    try:
        print(f"Servers on account: {len(client.server_list()['data'])}")
        app_id = create_app_example(client)
        database_example(client, app_id)
        ssl_example(client, app_id)
        error_handling_example(client)
        raw_response_example()

        print("\n" + "=" * 60)
        print("All examples completed successfully!")
        print("=" * 60)

    except TransportError as e:
        print(f"\nCould not reach ServerPilot: {e.message}")
        sys.exit(1)
    except ServiceError as e:
        print(f"\nExample failed with error {e.code}: {e.message}")
        sys.exit(1)

    finally:
        client.close()


if __name__ == "__main__":
    main()
