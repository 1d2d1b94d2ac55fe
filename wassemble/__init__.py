"""Typed clients for the Discord, GitHub and OpenAI HTTP APIs, and a greeting."""

__version__ = "0.1.0"
__all__ = ["discord", "github", "hello", "openai"]