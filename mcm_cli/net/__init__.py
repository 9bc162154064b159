"""
Network Layer.

This package performs the HTTP downloads that install individual items.
"""

from .fetcher import Fetcher

__all__ = ["Fetcher"]
