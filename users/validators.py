"""Field validators for user data."""

import re

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@"
    r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+"
    r"[a-zA-Z]{2,}$"
)

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64


def is_email_valid(candidate: str) -> bool:
    """Return True if candidate looks like local-part@domain.tld."""
    if not isinstance(candidate, str) or len(candidate) > MAX_EMAIL_LENGTH:
        return False
    if not EMAIL_PATTERN.fullmatch(candidate):
        return False
    local_part = candidate.rsplit("@", 1)[0]
    return len(local_part) <= MAX_LOCAL_PART_LENGTH
