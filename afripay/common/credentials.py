"""Fail-fast lookup of provider secrets."""

from afripay.common.config import AfripaySettings
from afripay.common.errors import MissingCredentialsError


def resolve_credentials(settings: AfripaySettings, fields: tuple[str, ...]) -> dict[str, str]:
    """Return the requested secrets, raising on the first absent one.

    The error message names the environment variable backing the field, which
    is the upper-cased field name.
    """

    credentials = {}
    for field in fields:
        value = getattr(settings, field)
        if not value:
            raise MissingCredentialsError(f"{field.upper()} is not set")
        credentials[field] = value
    return credentials
