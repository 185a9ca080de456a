"""Core package for the Aervix electronics club.

This module exposes the record models and the persistence layer so that
consumers of the package can simply import them from ``aervix_club``.
"""

from .core.backend import JSONFileBackend, KeyValueBackend, MemoryBackend
from .core.models import BoardTask, Comment, Message, User
from .core.storage import ClubStorage

__all__ = [
    "BoardTask",
    "ClubStorage",
    "Comment",
    "JSONFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "Message",
    "User",
]
