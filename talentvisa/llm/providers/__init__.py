"""
LLM provider implementations.
"""

from .openrouter_client import OpenRouterClient, create_llm_client

__all__ = [
    "OpenRouterClient",
    "create_llm_client",
]
