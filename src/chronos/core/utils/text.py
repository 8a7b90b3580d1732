"""Text processing utilities."""

import re

from chronos.core.constants import MAX_SLUG_LENGTH


def username_from_email(email: str) -> str:
    """Derive a username from an email address.

    Examples:
        >>> username_from_email("jane.doe@acme.com")
        'jane.doe'
    """
    return email.split("@", 1)[0]


def generate_slug(name: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a tenant slug matching ``^[a-z0-9-]+$`` from a name.

    Examples:
        >>> generate_slug("Acme Corporation")
        'acme-corporation'
        >>> generate_slug("Hello! World_2024")
        'hello-world-2024'
    """
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s_-]", "", slug)
    slug = re.sub(r"[-\s_]+", "-", slug).strip("-")
    return slug[:max_length]
