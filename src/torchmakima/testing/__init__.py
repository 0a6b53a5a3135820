"""Test helpers for torchmakima."""

from . import strategies

__all__ = [
    "strategies",
]
