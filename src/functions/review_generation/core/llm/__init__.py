"""Language model clients."""

from .openai_client import OpenAIReviewClient

__all__ = ["OpenAIReviewClient"]
