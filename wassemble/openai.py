"""A small client for the OpenAI REST API: chat completions and embeddings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

OPENAI_API_BASE = "https://api.openai.com/v1"


@dataclass(frozen=True)
class ChatMessage:
    """One message of a conversation."""

    role: str
    content: str


@dataclass(frozen=True)
class ChatCompletion:
    """A request for a chat completion."""

    model: str
    messages: list[ChatMessage] = field(default_factory=list)
    temperature: float | None = None
    max_tokens: int | None = None


@dataclass(frozen=True)
class ChatResponse:
    """The first choice of a chat completion."""

    id: str
    model: str
    content: str
    finish_reason: str


@dataclass(frozen=True)
class Embedding:
    """A request to embed a piece of text."""

    model: str
    input: str


@dataclass(frozen=True)
class EmbeddingResponse:
    """The first embedding vector returned."""

    model: str
    embedding: list[float]


def _headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}


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


def _required(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object holding {key!r}")
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"Missing field {key!r} in response") from None
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"Field {key!r} has the wrong type")
    return value


def _first(data: dict[str, Any], key: str) -> Any:
    items = _required(data, key, list)
    if not items:
        raise ValueError(f"Field {key!r} is empty")
    return items[0]


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Embedding values must be numbers")
    return float(value)


def create_chat_completion(api_key: str, completion: ChatCompletion) -> ChatResponse:
    """Request a chat completion and return its first choice."""
    payload = {
        "model": completion.model,
        "messages": [{"role": m.role, "content": m.content} for m in completion.messages],
        "temperature": completion.temperature,
        "max_tokens": completion.max_tokens,
    }
    response = requests.post(
        f"{OPENAI_API_BASE}/chat/completions",
        headers=_headers(api_key),
        json=payload,
    )
    data = _body_json(response)
    response_id = _required(data, "id", str)
    model = _required(data, "model", str)
    choice = _first(data, "choices")
    message = _required(choice, "message", dict)
    return ChatResponse(
        id=response_id,
        model=model,
        content=_required(message, "content", str),
        finish_reason=_required(choice, "finish_reason", str),
    )


def create_embedding(api_key: str, embedding: Embedding) -> EmbeddingResponse:
    """Embed a piece of text and return the first vector."""
    response = requests.post(
        f"{OPENAI_API_BASE}/embeddings",
        headers=_headers(api_key),
        json={"model": embedding.model, "input": embedding.input},
    )
    data = _body_json(response)
    model = _required(data, "model", str)
    vector = _required(_first(data, "data"), "embedding", list)
    return EmbeddingResponse(model=model, embedding=[_float(v) for v in vector])