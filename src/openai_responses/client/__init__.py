"""
Client layer - public API for the Responses endpoints.
"""

from openai_responses.client.core import ResponsesClient
from openai_responses.client.dispatch import ResponseDispatcher, error_for_status

__all__ = [
    "ResponseDispatcher",
    "ResponsesClient",
    "error_for_status",
]
