"""Tests for the request logging middleware."""

import logging

from conftest import USER_ID


def test_credentials_are_masked(client, caplog):
    caplog.set_level(logging.DEBUG, logger="neo_file_gateway.api.middleware")

    client.get("/list", params={"bearer": f"{USER_ID}.user-secret"})
    client.get("/list", headers={"Authorization": f"Bearer {USER_ID}:user-secret"})

    middleware_messages = [
        record.getMessage() for record in caplog.records if record.name == "neo_file_gateway.api.middleware"
    ]
    assert middleware_messages
    assert all("user-secret" not in message for message in middleware_messages)
    assert any("'bearer': '***'" in message for message in middleware_messages)


def test_status_is_not_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="neo_file_gateway.api.middleware")

    client.get("/status")

    assert not [record for record in caplog.records if record.name == "neo_file_gateway.api.middleware"]
