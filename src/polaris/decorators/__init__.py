"""Decorators for Result-based error handling at raising boundaries."""

from polaris.decorators.safe import safe, safe_async

__all__ = ['safe', 'safe_async']
