"""Recipient directory port: answers whether a user id can own notifications."""

from abc import ABC, abstractmethod


class RecipientDirectory(ABC):
    """Abstract interface over the external user store."""

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        ...
