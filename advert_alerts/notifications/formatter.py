from __future__ import annotations

from typing import Tuple

EXPIRING_ADVERT_TITLE = "Advert Expiring Soon"


def format_expiring_advert(client_name: str) -> Tuple[str, str]:
    """Build the (title, message) pair for an advert ending tomorrow."""
    message = (
        f'Your advert for "{client_name}" expires tomorrow. '
        "Consider renewing it."
    )
    return EXPIRING_ADVERT_TITLE, message
