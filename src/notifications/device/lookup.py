"""Read helpers over the DeviceToken store."""

from notifications.device.device_token import DeviceToken
from protean.utils.globals import current_domain

# Protean querysets return at most this many rows per page
_PAGE_SIZE = 100


def _all(**filters) -> list[DeviceToken]:
    dao = current_domain.repository_for(DeviceToken)._dao
    tokens: list[DeviceToken] = []
    offset = 0
    while True:
        page = dao.query.filter(**filters).offset(offset).limit(_PAGE_SIZE).all()
        tokens.extend(page.items)
        offset += _PAGE_SIZE
        if offset >= page.total or not page.items:
            return tokens


def active_tokens_for(user_id: str) -> list[DeviceToken]:
    """Every active device token registered for ``user_id``."""
    return _all(user_id=str(user_id), is_active=True)


def find_token(user_id: str, token: str) -> DeviceToken | None:
    results = _all(user_id=str(user_id), token=token)
    return results[0] if results else None


def find_by_token_value(tokens: list[str]) -> list[DeviceToken]:
    """Active DeviceToken rows whose token string is in ``tokens``."""
    if not tokens:
        return []
    return _all(token__in=list(tokens), is_active=True)
