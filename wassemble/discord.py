"""A small client for the Discord REST API: webhooks, messages, channels and users."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import requests

DISCORD_API_BASE = "https://discord.com/api/v10"


@dataclass(frozen=True)
class Webhook:
    """A channel webhook and the credentials needed to post through it."""

    id: str
    token: str
    url: str


@dataclass(frozen=True)
class Channel:
    """A Discord channel."""

    id: str
    name: str
    type: int
    guild_id: str | None = None


@dataclass(frozen=True)
class User:
    """A Discord user."""

    id: str
    username: str
    discriminator: str
    avatar: str | None = None


@dataclass(frozen=True)
class Message:
    """A message to be posted to a channel."""

    channel_id: str
    content: str
    guild_id: str | None = None


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bot {token}"}


def _body_text(response: requests.Response) -> str:
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Failed to parse response as UTF-8: {exc}") from exc


def _body_json(response: requests.Response) -> dict[str, Any]:
    text = _body_text(response)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse response as JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object in the response")
    return data


def _required(data: dict[str, Any], key: str, kind: type) -> Any:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"Missing field {key!r} in response") from None
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"Field {key!r} has the wrong type")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Field {key!r} has the wrong type")
    return value


def create_webhook(token: str, channel_id: str, name: str) -> Webhook:
    """Create a webhook in a channel."""
    response = requests.post(
        f"{DISCORD_API_BASE}/channels/{channel_id}/webhooks",
        headers=_auth(token),
        json={"name": name},
    )
    data = _body_json(response)
    return Webhook(
        id=_required(data, "id", str),
        token=_required(data, "token", str),
        url=_required(data, "url", str),
    )


def delete_webhook(token: str, webhook_id: str, webhook_token: str) -> bool:
    """Delete a webhook; true when the response body mentions 200."""
    response = requests.delete(
        f"{DISCORD_API_BASE}/webhooks/{webhook_id}/{webhook_token}",
        headers=_auth(token),
    )
    return "200" in _body_text(response)


def delete_message(token: str, channel_id: str, message_id: str) -> bool:
    """Delete a message; true when the response body mentions 200."""
    response = requests.delete(
        f"{DISCORD_API_BASE}/channels/{channel_id}/messages/{message_id}",
        headers=_auth(token),
    )
    return "200" in _body_text(response)


def edit_message(token: str, channel_id: str, message_id: str, content: str) -> bool:
    """Replace a message's content; true when the response body mentions 200."""
    response = requests.patch(
        f"{DISCORD_API_BASE}/channels/{channel_id}/messages/{message_id}",
        headers=_auth(token),
        json={"content": content},
    )
    return "200" in _body_text(response)


def get_channel(token: str, channel_id: str) -> Channel:
    """Fetch a channel."""
    response = requests.get(
        f"{DISCORD_API_BASE}/channels/{channel_id}",
        headers=_auth(token),
    )
    data = _body_json(response)
    channel_type = _required(data, "type", int)
    if channel_type < 0:
        raise ValueError("Field 'type' must not be negative")
    return Channel(
        id=_required(data, "id", str),
        name=_required(data, "name", str),
        type=channel_type,
        guild_id=_optional_str(data, "guild_id"),
    )


def get_user(token: str, user_id: str) -> User:
    """Fetch a user."""
    response = requests.get(
        f"{DISCORD_API_BASE}/users/{user_id}",
        headers=_auth(token),
    )
    data = _body_json(response)
    return User(
        id=_required(data, "id", str),
        username=_required(data, "username", str),
        discriminator=_required(data, "discriminator", str),
        avatar=_optional_str(data, "avatar"),
    )


def send_message(token: str, message: Message) -> str:
    """Post a message to its channel and return the new message's id."""
    response = requests.post(
        f"{DISCORD_API_BASE}/channels/{message.channel_id}/messages",
        headers=_auth(token),
        json={"content": message.content, "guild_id": message.guild_id},
    )
    return _required(_body_json(response), "id", str)


def send_webhook_message(token: str, webhook: Webhook, content: str) -> str:
    """Post a message through a webhook and return the new message's id."""
    response = requests.post(
        f"{DISCORD_API_BASE}/webhooks/{webhook.id}/{webhook.token}",
        headers=_auth(token),
        json={"content": content},
    )
    return _required(_body_json(response), "id", str)