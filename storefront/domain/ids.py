import uuid

from storefront.domain.errors import InvalidRequestError


def check_id(raw: str, kind: str) -> str:
    """Document ids are UUID strings; anything else is a 400, not a 404."""
    try:
        uuid.UUID(raw)
    except (ValueError, TypeError):
        raise InvalidRequestError(f"Invalid {kind} id: {raw!r}") from None
    return raw
