import json

import pytest
import requests
import responses

from wassemble.discord import (
    DISCORD_API_BASE,
    Channel,
    Message,
    User,
    Webhook,
    create_webhook,
    delete_message,
    delete_webhook,
    edit_message,
    get_channel,
    get_user,
    send_message,
    send_webhook_message,
)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _sent_json(call):
    return json.loads(call.request.body)


def test_create_webhook_parses_response(mocked):
    mocked.post(
        "https://discord.com/api/v10/channels/c1/webhooks",
        json={"id": "w1", "token": "token", "url": "https://hooks.example.com/w1"},
    )
    hook = create_webhook("token", "c1", "builder")
    assert hook == Webhook(id="w1", token="token", url="https://hooks.example.com/w1")
    call = mocked.calls[0]
    assert call.request.headers["Authorization"] == "Bot token"
    assert _sent_json(call) == {"name": "builder"}


def test_create_webhook_missing_field_raises(mocked):
    mocked.post(f"{DISCORD_API_BASE}/channels/c1/webhooks", json={"id": "w1"})
    with pytest.raises(ValueError):
        create_webhook("token", "c1", "builder")


def test_delete_webhook_true_when_body_mentions_200(mocked):
    mocked.delete(f"{DISCORD_API_BASE}/webhooks/w1/token", body="status 200")
    assert delete_webhook("token", "w1", "token") is True
    assert mocked.calls[0].request.headers["Authorization"] == "Bot token"


def test_delete_webhook_false_otherwise(mocked):
    mocked.delete(f"{DISCORD_API_BASE}/webhooks/w1/token", body="", status=204)
    assert delete_webhook("token", "w1", "token") is False


def test_delete_message_true_when_body_mentions_200(mocked):
    mocked.delete(f"{DISCORD_API_BASE}/channels/c1/messages/m1", body='{"code": 200}')
    assert delete_message("token", "c1", "m1") is True


def test_delete_message_false_on_empty_body(mocked):
    mocked.delete(f"{DISCORD_API_BASE}/channels/c1/messages/m1", body="", status=204)
    assert delete_message("token", "c1", "m1") is False


def test_edit_message_sends_content(mocked):
    url = f"{DISCORD_API_BASE}/channels/c1/messages/m1"
    mocked.add(responses.PATCH, url, body='{"id": "m1", "status": 200}')
    assert edit_message("token", "c1", "m1", "new text") is True
    assert _sent_json(mocked.calls[0]) == {"content": "new text"}


def test_edit_message_false_without_200(mocked):
    url = f"{DISCORD_API_BASE}/channels/c1/messages/m1"
    mocked.add(responses.PATCH, url, json={"id": "m1"})
    assert edit_message("token", "c1", "m1", "x") is False


def test_get_channel_with_guild(mocked):
    mocked.get(
        f"{DISCORD_API_BASE}/channels/c1",
        json={"id": "c1", "name": "general", "type": 0, "guild_id": "g1"},
    )
    assert get_channel("token", "c1") == Channel(
        id="c1", name="general", type=0, guild_id="g1"
    )


def test_get_channel_without_guild(mocked):
    mocked.get(
        f"{DISCORD_API_BASE}/channels/c2",
        json={"id": "c2", "name": "dm", "type": 1},
    )
    channel = get_channel("token", "c2")
    assert channel.guild_id is None
    assert channel.type == 1


def test_get_channel_negative_type_raises(mocked):
    mocked.get(
        f"{DISCORD_API_BASE}/channels/c3",
        json={"id": "c3", "name": "x", "type": -1},
    )
    with pytest.raises(ValueError):
        get_channel("token", "c3")


def test_get_user_with_null_avatar(mocked):
    mocked.get(
        f"{DISCORD_API_BASE}/users/u1",
        json={"id": "u1", "username": "alice", "discriminator": "0001", "avatar": None},
    )
    assert get_user("token", "u1") == User(
        id="u1", username="alice", discriminator="0001", avatar=None
    )


def test_get_user_invalid_json_raises(mocked):
    mocked.get(f"{DISCORD_API_BASE}/users/u1", body="not json")
    with pytest.raises(ValueError):
        get_user("token", "u1")


def test_get_user_invalid_utf8_raises(mocked):
    mocked.get(f"{DISCORD_API_BASE}/users/u1", body=b"\xff\xfe")
    with pytest.raises(ValueError):
        get_user("token", "u1")


def test_send_message_returns_id(mocked):
    mocked.post(
        f"{DISCORD_API_BASE}/channels/c1/messages",
        json={"id": "m42", "content": "hi"},
    )
    message_id = send_message("token", Message(channel_id="c1", content="hi"))
    assert message_id == "m42"
    assert _sent_json(mocked.calls[0]) == {"content": "hi", "guild_id": None}


def test_send_message_includes_guild(mocked):
    mocked.post(f"{DISCORD_API_BASE}/channels/c1/messages", json={"id": "m1"})
    message_id = send_message(
        "token", Message(channel_id="c1", content="hi", guild_id="g1")
    )
    assert message_id == "m1"
    assert _sent_json(mocked.calls[0])["guild_id"] == "g1"


def test_send_message_without_id_raises(mocked):
    mocked.post(f"{DISCORD_API_BASE}/channels/c1/messages", json={"content": "hi"})
    with pytest.raises(ValueError):
        send_message("token", Message(channel_id="c1", content="hi"))


def test_send_webhook_message(mocked):
    hook = Webhook(id="w1", token="token", url="https://hooks.example.com/w1")
    mocked.post(f"{DISCORD_API_BASE}/webhooks/w1/token", json={"id": "m7"})
    assert send_webhook_message("token", hook, "ping") == "m7"
    call = mocked.calls[0]
    assert _sent_json(call) == {"content": "ping"}
    assert call.request.headers["Authorization"] == "Bot token"


def test_connection_failure_propagates(mocked):
    with pytest.raises(requests.ConnectionError):
        get_channel("token", "unregistered")