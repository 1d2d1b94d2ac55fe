# wassemble

Small, typed Python clients for a handful of web APIs: Discord, GitHub and
OpenAI. Each call makes one HTTP request with `requests` and hands back a
frozen dataclass, a string or a boolean.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Discord (`wassemble.discord`)

Calls go to the v10 REST API and authenticate as a bot
(`Authorization: Bot <token>`).

```python
from wassemble import discord

channel = discord.get_channel("token", "42")
print(channel.name, channel.type, channel.guild_id)

message_id = discord.send_message(
    "token",
    discord.Message(channel_id=channel.id, content="Hello!", guild_id=channel.guild_id),
)
discord.edit_message("token", channel.id, message_id, "Hello again!")
discord.delete_message("token", channel.id, message_id)

webhook = discord.create_webhook("token", channel.id, "notifier")
discord.send_webhook_message("token", webhook, "Posted through a webhook")
discord.delete_webhook("token", webhook.id, webhook.token)

user = discord.get_user("token", "7")
print(user.username, user.discriminator, user.avatar)
```

Dataclasses: `Webhook(id, token, url)`, `Channel(id, name, type, guild_id)`,
`User(id, username, discriminator, avatar)` and
`Message(channel_id, content, guild_id)`.

`send_message` and `send_webhook_message` return the `id` of the new
message. `edit_message`, `delete_message` and `delete_webhook` return
`True` only when the text of the response body contains `"200"`; the HTTP
status code itself is not looked at.

### GitHub (`wassemble.github`)

Calls go to the REST v3 API with a bearer token.

```python
from wassemble import github

me = github.get_user("token")
repo = github.create_repository("token", "sandbox", "A place to try things")
issue = github.create_issue("token", repo.owner, repo.name, "Bug", "Something broke")
github.update_issue("token", repo.owner, repo.name, issue.number, "Bug (fixed)", "Done")
github.delete_repository("token", repo.owner, repo.name)  # True on HTTP 204
```

Dataclasses: `Issue(body, number, title)`,
`Repository(description, name, owner)` where `owner` is the owner's login,
and `User(avatar_url, id, login)`. Repositories are always created public.

### OpenAI (`wassemble.openai`)

```python
from wassemble import openai

reply = openai.create_chat_completion(
    "placeholder",
    openai.ChatCompletion(
        model="gpt-4o-mini",
        messages=[openai.ChatMessage(role="user", content="Say hi")],
        temperature=0.2,
        max_tokens=50,
    ),
)
print(reply.id, reply.model, reply.content, reply.finish_reason)

vector = openai.create_embedding(
    "placeholder",
    openai.Embedding(model="text-embedding-3-small", input="hello"),
)
print(vector.model, len(vector.embedding))
```

Only the first choice of a chat completion and the first embedding in a
response are returned. `temperature` and `max_tokens` are sent as `null`
when left unset.

### Hello (`wassemble.hello`)

```python
from wassemble.hello import hello_world

hello_world()  # "Hello, World!"
```

## Errors

Network failures are raised by `requests`. Where a call reads the response
body, a body that is not valid UTF-8, is not a JSON object, or lacks an
expected field (or holds one of the wrong type) raises `ValueError`
rather than returning a partial result. An empty `choices` or `data` list
from OpenAI also raises `ValueError`.

## What it does not do

The package is a library only: it has no command-line tool, no retries, no
rate-limit handling and no pagination, and it covers only the calls listed
above.