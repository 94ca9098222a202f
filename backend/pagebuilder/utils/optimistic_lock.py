from typing import Optional

from dateutil.parser import parse, ParserError

from pagebuilder.domain.exceptions import ConflictError, ValidationError
from pagebuilder.domain.page import Page
from .timestamps import normalize_ts


def enforce_optimistic_lock(page: Page, client_ts: Optional[str]) -> None:
    """
    Enforces optimistic locking using an If-Unmodified-Since value.
    Raises ConflictError if the stored page changed since the client read it.
    """
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_dt = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError) as exc:
        raise ValidationError("Invalid If-Unmodified-Since header") from exc

    if page.updatedAt is None:
        return

    # HTTP dates carry whole seconds only
    server_dt = normalize_ts(page.updatedAt).replace(microsecond=0)

    if server_dt > client_dt:
        raise ConflictError(
            "Conflict detected. Page has been modified since it was loaded.",
            slug=page.slug,
        )
