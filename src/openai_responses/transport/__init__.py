"""
Transport layer - HTTP communication with the API.
"""

from openai_responses.transport.http import HttpTransport

__all__ = [
    "HttpTransport",
]
