"""Utility exports."""

from .concurrency import gather_fail_fast

__all__ = ["gather_fail_fast"]
