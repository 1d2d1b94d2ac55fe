"""A small client for the GitHub REST API: issues, repositories and the current user."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import requests

GITHUB_API_BASE = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github.v3+json"

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Issue:
    """An issue in a repository."""

    body: str
    number: int
    title: str


@dataclass(frozen=True)
class Repository:
    """A repository, with its owner's login."""

    description: str
    name: str
    owner: str


@dataclass(frozen=True)
class User:
    """A GitHub account."""

    avatar_url: str
    id: int
    login: str


def _headers(token: str, *, with_body: bool = False) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {token}", "Accept": GITHUB_ACCEPT}
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


def _body_json(response: requests.Response) -> dict[str, Any]:
    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Failed to parse response as UTF-8: {exc}") from exc
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


def _unsigned(data: dict[str, Any], key: str, limit: int) -> int:
    value = _required(data, key, int)
    if not 0 <= value <= limit:
        raise ValueError(f"Field {key!r} is out of range")
    return value


def _issue(data: dict[str, Any]) -> Issue:
    return Issue(
        body=_required(data, "body", str),
        number=_unsigned(data, "number", _U32_MAX),
        title=_required(data, "title", str),
    )


def _user(data: dict[str, Any]) -> User:
    return User(
        avatar_url=_required(data, "avatar_url", str),
        id=_unsigned(data, "id", _U64_MAX),
        login=_required(data, "login", str),
    )


def create_issue(token: str, owner: str, repo: str, title: str, body: str) -> Issue:
    """Open a new issue in a repository."""
    response = requests.post(
        f"{GITHUB_API_BASE}/repos/{owner}/{repo}/issues",
        headers=_headers(token, with_body=True),
        json={"title": title, "body": body},
    )
    return _issue(_body_json(response))


def create_repository(token: str, name: str, description: str) -> Repository:
    """Create a public repository for the authenticated user."""
    response = requests.post(
        f"{GITHUB_API_BASE}/user/repos",
        headers=_headers(token, with_body=True),
        json={"name": name, "description": description, "private": False},
    )
    data = _body_json(response)
    owner = _user(_required(data, "owner", dict))
    return Repository(
        description=_required(data, "description", str),
        name=_required(data, "name", str),
        owner=owner.login,
    )


def delete_repository(token: str, owner: str, repo: str) -> bool:
    """Delete a repository; true when GitHub answers 204 No Content."""
    response = requests.delete(
        f"{GITHUB_API_BASE}/repos/{owner}/{repo}",
        headers=_headers(token),
    )
    return response.status_code == 204


def get_user(token: str) -> User:
    """Fetch the authenticated user."""
    response = requests.get(f"{GITHUB_API_BASE}/user", headers=_headers(token))
    return _user(_body_json(response))


def update_issue(
    token: str, owner: str, repo: str, number: int, title: str, body: str
) -> Issue:
    """Replace an issue's title and body."""
    response = requests.patch(
        f"{GITHUB_API_BASE}/repos/{owner}/{repo}/issues/{number}",
        headers=_headers(token, with_body=True),
        json={"title": title, "body": body},
    )
    return _issue(_body_json(response))