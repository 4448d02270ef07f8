"""
Contracts Module

Shared value types that cross layer boundaries.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses)
2. Failures are explicit Error values wrapped in a Result
3. All timestamps use UTC and are never mutated
"""

from .base import ErrorKind, ErrorCode, Error, Result, Timestamp

__all__ = ['ErrorKind', 'ErrorCode', 'Error', 'Result', 'Timestamp']
