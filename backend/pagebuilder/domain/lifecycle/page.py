from typing import Dict, Set

from ..exceptions import IllegalTransition
from ..page import PageStatus

# Explicit allowed state transitions
ALLOWED_PAGE_TRANSITIONS: Dict[PageStatus, Set[PageStatus]] = {
    PageStatus.DRAFT: {PageStatus.DRAFT, PageStatus.PUBLISHED},
    PageStatus.PUBLISHED: {PageStatus.DRAFT},  # published → draft ONLY via revert
}


def assert_page_transition(*, from_status: PageStatus, to_status: PageStatus) -> None:
    """
    Guards page lifecycle transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise IllegalTransition(
            f"Illegal page transition: {from_status.value} → {to_status.value}"
        )
