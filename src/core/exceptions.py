"""
Exceptions raised while counting finished items.
"""

from typing import Any


class CounterError(Exception):
    """Base exception for the monthly counter."""


class ConfigurationError(CounterError):
    """Required configuration is missing or invalid."""


class RemoteQueryError(CounterError):
    """
    The Notion API answered with a non-success status.

    Carries the status code and the decoded body so the caller can pass
    both through unchanged.
    """

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Notion API returned {status_code}")
