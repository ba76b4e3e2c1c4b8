"""In-memory recipient directory for development and testing."""

from notifications.recipients.port import RecipientDirectory


class FakeRecipientDirectory(RecipientDirectory):
    """Accepts every user id unless configured with an explicit set."""

    def __init__(self, known_ids: set[str] | None = None):
        self.known_ids = set(known_ids) if known_ids is not None else None

    def configure(self, known_ids: set[str] | None = None):
        """Restrict lookups to ``known_ids``; ``None`` accepts everyone again."""
        self.known_ids = set(known_ids) if known_ids is not None else None

    def exists(self, user_id: str) -> bool:
        if self.known_ids is None:
            return True
        return str(user_id) in self.known_ids

    def reset(self):
        self.known_ids = None
