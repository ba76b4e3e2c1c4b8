"""Recipient directory registry.

The user store is owned by another service. Defaults to a directory that
accepts every id; deployments install one backed by the real user store.
"""

from notifications.recipients.port import RecipientDirectory

_current_directory: RecipientDirectory | None = None


def get_directory() -> RecipientDirectory:
    """Return the current recipient directory. Defaults to FakeRecipientDirectory."""
    global _current_directory
    if _current_directory is None:
        from notifications.recipients.fake_directory import FakeRecipientDirectory

        _current_directory = FakeRecipientDirectory()
    return _current_directory


def set_directory(directory: RecipientDirectory) -> None:
    global _current_directory
    _current_directory = directory


def reset_directory() -> None:
    global _current_directory
    _current_directory = None
