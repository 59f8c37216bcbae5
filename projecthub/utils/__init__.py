"""Utility helpers shared by use cases and transports."""

from .action import action, is_action_success, resolve_action_name, wrap_action
from .rate_limit import FixedWindowRateLimiter

__all__ = [
    "action",
    "wrap_action",
    "is_action_success",
    "resolve_action_name",
    "FixedWindowRateLimiter",
]
