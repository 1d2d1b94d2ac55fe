"""The simplest component: a fixed greeting."""

GREETING = "Hello, World!"


def hello_world() -> str:
    """Return the greeting."""
    return GREETING