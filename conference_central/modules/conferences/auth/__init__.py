"""
Authentication Module

Provides the caller identity dependency.
"""

from .middleware import Caller, get_caller

__all__ = [
    "Caller",
    "get_caller",
]
